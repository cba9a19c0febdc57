# models/emissions.py
from __future__ import annotations
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from models.fleet import FuelType, VehicleProfile, VehicleType
from models.routes import TravelMode


class EmissionFactor(BaseModel):
    """Grams CO2 per km for one (vehicle_type, fuel_type) key."""

    vehicle_type: VehicleType
    fuel_type: FuelType
    factor_g_per_km: float = Field(..., gt=0)
    is_active: bool = True
    description: Optional[str] = None
    source: Optional[str] = None

    @property
    def key(self) -> tuple[VehicleType, FuelType]:
        return (self.vehicle_type, self.fuel_type)


class LegModel(BaseModel):
    distance_km: float = Field(..., ge=0)
    travel_mode: TravelMode = TravelMode.driving
    vehicle: Optional[VehicleProfile] = None

    @model_validator(mode="after")
    def _vehicle_only_for_driving(self):
        if self.vehicle is not None and self.travel_mode != TravelMode.driving:
            raise ValueError("vehicle is only meaningful for driving legs")
        return self


class EmissionsRequest(BaseModel):
    legs: List[LegModel] = Field(..., min_length=1)


class EmissionsResult(BaseModel):
    total_kg_co2: float
    per_leg_kg_co2: List[float]
    units: str = "kgCO2"
