# core/emissions.py
from __future__ import annotations
import logging
from typing import Dict, Union

from core.exceptions import EmissionFactorNotFoundError
from core.interfaces import EmissionFactorStore
from models.fleet import VehicleProfile
from models.routes import TravelMode

logger = logging.getLogger(__name__)

# Population-average kg CO2 per km. "driving" is the baseline used when no
# vehicle is known and as the eco-score expectation for driving.
MODE_KG_PER_KM: Dict[str, float] = {
    "walking": 0.0,
    "cycling": 0.0,
    "transit": 0.05,
    "carpool": 0.06,
    "driving": 0.12,
}

Mode = Union[TravelMode, str]


def mode_key(mode: Mode) -> str:
    return mode.value if isinstance(mode, TravelMode) else str(mode).strip().lower()


def mode_kg_per_km(mode: Mode) -> float:
    key = mode_key(mode)
    if key not in MODE_KG_PER_KM:
        raise KeyError(f"No fixed emission coefficient for mode '{key}'")
    return MODE_KG_PER_KM[key]


def mode_co2_kg(distance_km: float, mode: Mode) -> float:
    """Fixed-coefficient path: walking/cycling 0, transit/carpool/driving baseline."""
    return float(distance_km) * mode_kg_per_km(mode)


def vehicle_co2_kg(
    distance_km: float, vehicle: VehicleProfile, store: EmissionFactorStore
) -> float:
    """
    Vehicle-specific path. The lookup is an exact (vehicle_type, fuel_type)
    match among active factors; a miss is an error, never a default.
    """
    factor = store.lookup(vehicle.vehicle_type, vehicle.fuel_type)
    if factor is None or not factor.is_active:
        logger.error(
            "no active emission factor for %s/%s",
            vehicle.vehicle_type.value,
            vehicle.fuel_type.value,
        )
        raise EmissionFactorNotFoundError(
            vehicle.vehicle_type.value, vehicle.fuel_type.value
        )
    return float(distance_km) * factor.factor_g_per_km / 1000.0  # g -> kg


def calculate_savings(baseline_kg: float, alternative_kg: float) -> float:
    return max(0.0, baseline_kg - alternative_kg)
