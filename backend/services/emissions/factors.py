# services/emissions/factors.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from core.exceptions import EmissionFactorTableError
from core.interfaces import EmissionFactorStore
from models.emissions import EmissionFactor
from models.fleet import FuelType, VehicleType

logger = logging.getLogger(__name__)

Key = Tuple[VehicleType, FuelType]

# Column names accepted for the g/km value, in order of preference
GRAMS_PER_KM_COLUMNS = ("emission_factor_g_per_km", "emission_factor")
# Per-litre tables need a consumption model to convert; we don't guess one
UNSUPPORTED_UNIT_COLUMNS = ("emission_factor_kg_per_liter",)


class EmissionFactorTable(EmissionFactorStore):
    """
    Read-only snapshot of emission factors in grams CO2 per km.
    At most one active factor per (vehicle_type, fuel_type); inactive rows are
    kept for listing but never returned by lookup().
    """

    def __init__(self, factors: Iterable[EmissionFactor], name: str = "custom") -> None:
        self.name = name
        self.factors: List[EmissionFactor] = list(factors)
        self._active: Dict[Key, EmissionFactor] = {}
        for f in self.factors:
            if not f.is_active:
                continue
            if f.key in self._active:
                raise EmissionFactorTableError(
                    f"Duplicate active emission factor for "
                    f"{f.vehicle_type.value}/{f.fuel_type.value}"
                )
            self._active[f.key] = f

    def lookup(
        self, vehicle_type: VehicleType, fuel_type: FuelType
    ) -> Optional[EmissionFactor]:
        return self._active.get((VehicleType(vehicle_type), FuelType(fuel_type)))

    def active(self) -> List[EmissionFactor]:
        return list(self._active.values())

    def __len__(self) -> int:
        return len(self._active)

    # ---------- Loaders ----------
    @classmethod
    def from_records(cls, records: Iterable[dict], name: str = "custom") -> "EmissionFactorTable":
        try:
            factors = [EmissionFactor(**r) for r in records]
        except ValueError as e:
            raise EmissionFactorTableError(f"Invalid emission factor row: {e}") from e
        return cls(factors, name=name)

    @classmethod
    def from_file(cls, path: str | Path) -> "EmissionFactorTable":
        """
        Load a CSV or XLSX export of the factor table. Required columns:
        vehicle_type, fuel_type and one of GRAMS_PER_KM_COLUMNS. Optional:
        is_active (default true), description, source.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Emission factor table not found: {path}")

        if path.suffix.lower() in (".xlsx", ".xls"):
            df = pd.read_excel(path)
        else:
            df = pd.read_csv(path)

        df.columns = [str(c).strip().lower() for c in df.columns]
        value_col = next((c for c in GRAMS_PER_KM_COLUMNS if c in df.columns), None)
        if value_col is None:
            if any(c in df.columns for c in UNSUPPORTED_UNIT_COLUMNS):
                raise EmissionFactorTableError(
                    f"{path.name}: per-litre factors must be migrated to g/km first"
                )
            raise EmissionFactorTableError(
                f"{path.name}: missing emission factor column "
                f"(expected one of {', '.join(GRAMS_PER_KM_COLUMNS)})"
            )
        for required in ("vehicle_type", "fuel_type"):
            if required not in df.columns:
                raise EmissionFactorTableError(f"{path.name}: missing column '{required}'")

        records = []
        for _, row in df.iterrows():
            if pd.isna(row["vehicle_type"]) or pd.isna(row["fuel_type"]) or pd.isna(row[value_col]):
                continue
            rec = {
                "vehicle_type": str(row["vehicle_type"]).strip().lower(),
                "fuel_type": str(row["fuel_type"]).strip().lower(),
                "factor_g_per_km": float(row[value_col]),
                "is_active": _as_bool(row.get("is_active", True)),
            }
            for opt in ("description", "source"):
                if opt in df.columns and not pd.isna(row[opt]):
                    rec[opt] = str(row[opt])
            records.append(rec)

        logger.info("loaded %d emission factors from %s", len(records), path)
        return cls.from_records(records, name=path.stem)

    @classmethod
    def seed(cls, name: str = "seed") -> "EmissionFactorTable":
        """Built-in averages (EPA 2023), one active row per key, g CO2/km."""
        rows = [
            ("car", "gasoline", 120.0, "Average gasoline car"),
            ("car", "diesel", 130.0, "Average diesel car"),
            ("car", "electric", 50.0, "Electric car (grid average)"),
            ("car", "hybrid", 80.0, "Hybrid car"),
            ("car", "lpg", 110.0, "LPG car"),
            ("car", "cng", 95.0, "CNG car"),
            ("motorcycle", "gasoline", 75.0, "Average motorcycle"),
            ("motorcycle", "electric", 25.0, "Electric motorcycle"),
            ("truck", "diesel", 250.0, "Light truck"),
            ("van", "gasoline", 180.0, "Gasoline van"),
            ("van", "diesel", 200.0, "Diesel van"),
            ("van", "electric", 60.0, "Electric van"),
            ("bus", "diesel", 80.0, "Diesel bus (per passenger)"),
            ("bus", "electric", 25.0, "Electric bus (per passenger)"),
        ]
        return cls.from_records(
            (
                {
                    "vehicle_type": v,
                    "fuel_type": f,
                    "factor_g_per_km": g,
                    "description": d,
                    "source": "EPA 2023",
                }
                for v, f, g, d in rows
            ),
            name=name,
        )


def _as_bool(raw) -> bool:
    if raw is None or (not isinstance(raw, str) and pd.isna(raw)):
        return True
    if isinstance(raw, str):
        return raw.strip().lower() not in ("0", "false", "no", "n", "")
    return bool(raw)
