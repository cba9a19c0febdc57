import pandas as pd
import pytest

from core.exceptions import EmissionFactorTableError
from models.fleet import FuelType, VehicleType
from services.emissions.emissions_factory import clear_cache, get_factor_table
from services.emissions.factors import EmissionFactorTable


def _write_csv(path, rows):
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


def test_seed_has_one_active_factor_per_key(factor_table):
    keys = [f.key for f in factor_table.active()]
    assert len(keys) == len(set(keys))
    assert factor_table.lookup("car", "gasoline").factor_g_per_km == 120.0
    assert factor_table.lookup(VehicleType.truck, FuelType.cng) is None


def test_duplicate_active_key_rejected():
    rows = [
        {"vehicle_type": "car", "fuel_type": "gasoline", "factor_g_per_km": 120.0},
        {"vehicle_type": "car", "fuel_type": "gasoline", "factor_g_per_km": 150.0},
    ]
    with pytest.raises(EmissionFactorTableError):
        EmissionFactorTable.from_records(rows)


def test_inactive_duplicate_is_allowed():
    rows = [
        {"vehicle_type": "car", "fuel_type": "gasoline", "factor_g_per_km": 120.0},
        {"vehicle_type": "car", "fuel_type": "gasoline", "factor_g_per_km": 150.0, "is_active": False},
    ]
    table = EmissionFactorTable.from_records(rows)
    assert table.lookup("car", "gasoline").factor_g_per_km == 120.0
    assert len(table.factors) == 2


def test_non_positive_factor_rejected():
    with pytest.raises(EmissionFactorTableError):
        EmissionFactorTable.from_records(
            [{"vehicle_type": "car", "fuel_type": "diesel", "factor_g_per_km": 0}]
        )


def test_csv_loader(tmp_path):
    path = _write_csv(
        tmp_path / "factors.csv",
        [
            {"vehicle_type": "Car", "fuel_type": "Diesel", "emission_factor": 131.5, "is_active": "true"},
            {"vehicle_type": "van", "fuel_type": "electric", "emission_factor": 61.0, "is_active": "false"},
            {"vehicle_type": "truck", "fuel_type": "cng", "emission_factor": 210.0, "is_active": "1"},
        ],
    )
    table = EmissionFactorTable.from_file(path)
    assert table.name == "factors"
    assert table.lookup("car", "diesel").factor_g_per_km == 131.5
    assert table.lookup("van", "electric") is None
    assert table.lookup("truck", "cng").factor_g_per_km == 210.0


def test_csv_without_is_active_defaults_to_active(tmp_path):
    path = _write_csv(
        tmp_path / "f.csv",
        [{"vehicle_type": "bus", "fuel_type": "diesel", "emission_factor_g_per_km": 82.0}],
    )
    assert EmissionFactorTable.from_file(path).lookup("bus", "diesel") is not None


def test_per_litre_table_rejected(tmp_path):
    path = _write_csv(
        tmp_path / "litres.csv",
        [{"vehicle_type": "car", "fuel_type": "gasoline", "emission_factor_kg_per_liter": 2.31}],
    )
    with pytest.raises(EmissionFactorTableError, match="per-litre"):
        EmissionFactorTable.from_file(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        EmissionFactorTable.from_file(tmp_path / "nope.csv")


def test_factory_prefers_configured_file(tmp_path):
    path = _write_csv(
        tmp_path / "custom.csv",
        [{"vehicle_type": "car", "fuel_type": "hybrid", "emission_factor": 70.0}],
    )
    clear_cache()
    try:
        table = get_factor_table(path)
        assert table.name == "custom"
        assert len(table) == 1
        assert get_factor_table().name == "seed"
    finally:
        clear_cache()
