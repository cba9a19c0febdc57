from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TravelMode(str, Enum):
    driving = "driving"
    walking = "walking"
    cycling = "cycling"
    transit = "transit"


class Location(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    label: Optional[str] = None

    # Accept {lat,lng}, {latitude,longitude} and [lon,lat] as well
    @model_validator(mode="before")
    @classmethod
    def _accept_shapes(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)) and len(v) == 2:
            return {"lon": float(v[0]), "lat": float(v[1])}
        if isinstance(v, dict):
            if "lng" in v and "lon" not in v:
                v = {**v, "lon": v["lng"]}
            if "latitude" in v and "longitude" in v:
                v = {**v, "lat": v["latitude"], "lon": v["longitude"]}
        return v

    def as_lonlat(self) -> List[float]:
        return [self.lon, self.lat]


class ProviderRoute(BaseModel):
    """A raw candidate as returned by a RoutingProvider, before scoring."""

    distance_km: float = Field(..., ge=0)
    duration_minutes: float = Field(..., ge=0)
    travel_mode: TravelMode
    # geometry + steps, passed through untouched
    route_data: Dict[str, Any] = Field(default_factory=dict)


class RouteCandidate(ProviderRoute):
    model_config = ConfigDict(frozen=True)

    co2_kg: float = Field(..., ge=0)
    eco_score: float = Field(..., ge=1.0, le=10.0)
