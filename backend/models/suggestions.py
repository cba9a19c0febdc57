from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field


class SuggestionType(str, Enum):
    walk = "walk"
    cycle = "cycle"
    transit = "transit"
    carpool = "carpool"


class EcoSuggestion(BaseModel):
    type: SuggestionType
    distance_km: float
    duration_minutes: float
    co2_savings_kg: float = Field(..., ge=0)
    # positive = slower than the reference route
    time_difference_minutes: float
    feasibility_score: float = Field(..., ge=1.0, le=10.0)
    description: str = ""
