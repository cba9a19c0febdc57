from __future__ import annotations
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from models.fleet import VehicleProfile
from models.preferences import TravelerPreferences
from models.routes import Location, RouteCandidate, TravelMode
from models.suggestions import EcoSuggestion

# Free text (geocoded) or explicit coordinates
Place = Union[str, Location]


class PlanRequest(BaseModel):
    origin: Place
    destination: Place
    vehicle: Optional[VehicleProfile] = None
    # Inline preferences win over the stored ones for user_id
    preferences: Optional[TravelerPreferences] = None
    user_id: Optional[str] = None
    # Only used by the alternatives endpoint
    travel_mode: Optional[TravelMode] = None

    @field_validator("origin", "destination")
    @classmethod
    def _non_blank(cls, v: Place) -> Place:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("location text must not be empty")
        return v


class AggregateResult(BaseModel):
    routes: List[RouteCandidate] = Field(default_factory=list)
    total_co2_saved_kg: float = 0.0
    # First driving candidate in provider order; the suggestion baseline
    reference_route: Optional[RouteCandidate] = None
    # mode -> error text for modes that were dropped
    failed_modes: Dict[str, str] = Field(default_factory=dict)


class PlanningResult(BaseModel):
    origin: Location
    destination: Location
    routes: List[RouteCandidate] = Field(default_factory=list)
    eco_suggestions: List[EcoSuggestion] = Field(default_factory=list)
    total_co2_saved_kg: float = 0.0


class AlternativesResult(BaseModel):
    origin: Location
    destination: Location
    travel_mode: TravelMode
    alternatives: List[RouteCandidate] = Field(default_factory=list)


class SuggestionsResult(BaseModel):
    origin: Location
    destination: Location
    driving_route: RouteCandidate
    eco_suggestions: List[EcoSuggestion] = Field(default_factory=list)
