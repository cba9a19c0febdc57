from __future__ import annotations
from pydantic import BaseModel, Field

from models.routes import TravelMode


class TravelerPreferences(BaseModel):
    max_walking_distance_km: float = Field(2.0, ge=0)
    max_cycling_distance_km: float = Field(10.0, ge=0)
    avoid_tolls: bool = False
    avoid_highways: bool = False
    prefer_eco_routes: bool = True
    default_travel_mode: TravelMode = TravelMode.driving
