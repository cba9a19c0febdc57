from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, field_validator


class VehicleType(str, Enum):
    car = "car"
    motorcycle = "motorcycle"
    truck = "truck"
    bus = "bus"
    van = "van"


class FuelType(str, Enum):
    gasoline = "gasoline"
    diesel = "diesel"
    electric = "electric"
    hybrid = "hybrid"
    lpg = "lpg"
    cng = "cng"


class VehicleProfile(BaseModel):
    """Only used to pick an emission factor for driving candidates."""

    vehicle_type: VehicleType
    fuel_type: FuelType = FuelType.gasoline

    # Accept "Diesel", " CAR " etc. from loose clients
    @field_validator("vehicle_type", "fuel_type", mode="before")
    @classmethod
    def _normalize(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v
