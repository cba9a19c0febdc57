# services/planning/suggestions.py
from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Mapping, Optional

from core.emissions import calculate_savings, mode_co2_kg
from core.interfaces import RoutingProvider
from models.preferences import TravelerPreferences
from models.routes import Location, ProviderRoute, RouteCandidate, TravelMode
from models.suggestions import EcoSuggestion, SuggestionType

logger = logging.getLogger(__name__)

# minutes of extra travel time per lost feasibility point
WALK_DECAY_MIN = 10.0
CYCLE_DECAY_MIN = 15.0
TRANSIT_DECAY_MIN = 20.0

# Carpool is modeled, not routed
CARPOOL_MIN_DISTANCE_KM = 5.0
CARPOOL_EMISSION_SHARE = 0.5
CARPOOL_TIME_PENALTY = 0.2
CARPOOL_FEASIBILITY = 7.0


def feasibility(alt_minutes: float, ref_minutes: float, decay_minutes: float) -> float:
    return max(1.0, 10.0 - abs(alt_minutes - ref_minutes) / decay_minutes)


class SuggestionGenerator:
    def __init__(self, provider: RoutingProvider):
        self.provider = provider

    async def _best_route(
        self, origin: Location, destination: Location, mode: TravelMode
    ) -> Optional[ProviderRoute]:
        routes = await self.provider.get_routes(origin, destination, mode, alternatives=False)
        return routes[0] if routes else None

    async def _routes_for(
        self,
        origin: Location,
        destination: Location,
        modes: List[TravelMode],
        known: Mapping[TravelMode, ProviderRoute],
    ) -> Dict[TravelMode, ProviderRoute]:
        found = {m: known[m] for m in modes if m in known}
        missing = [m for m in modes if m not in found]
        results = await asyncio.gather(
            *(self._best_route(origin, destination, m) for m in missing),
            return_exceptions=True,
        )
        for mode, res in zip(missing, results):
            if isinstance(res, BaseException):
                if not isinstance(res, Exception):
                    raise res
                logger.warning("no %s route for suggestion: %s", mode.value, res)
            elif res is not None:
                found[mode] = res
        return found

    async def generate(
        self,
        origin: Location,
        destination: Location,
        reference: RouteCandidate,
        preferences: TravelerPreferences,
        known: Optional[Mapping[TravelMode, ProviderRoute]] = None,
    ) -> List[EcoSuggestion]:
        """
        Greener alternatives to the reference (driving) route, best first.
        Each rule is gated on its own and a failed fetch only drops that rule.
        """
        wanted: List[TravelMode] = []
        if reference.distance_km <= preferences.max_walking_distance_km:
            wanted.append(TravelMode.walking)
        if reference.distance_km <= preferences.max_cycling_distance_km:
            wanted.append(TravelMode.cycling)
        wanted.append(TravelMode.transit)

        routes = await self._routes_for(origin, destination, wanted, known or {})

        suggestions: List[EcoSuggestion] = []
        if TravelMode.walking in routes:
            suggestions.append(_walk(routes[TravelMode.walking], reference))
        if TravelMode.cycling in routes:
            suggestions.append(_cycle(routes[TravelMode.cycling], reference))
        if TravelMode.transit in routes:
            transit = _transit(routes[TravelMode.transit], reference)
            if transit is not None:
                suggestions.append(transit)
        if reference.distance_km > CARPOOL_MIN_DISTANCE_KM:
            suggestions.append(_carpool(reference))

        return sorted(suggestions, key=lambda s: s.feasibility_score, reverse=True)


def _walk(route: ProviderRoute, reference: RouteCandidate) -> EcoSuggestion:
    savings = calculate_savings(reference.co2_kg, 0.0)
    return EcoSuggestion(
        type=SuggestionType.walk,
        distance_km=route.distance_km,
        duration_minutes=route.duration_minutes,
        co2_savings_kg=savings,
        time_difference_minutes=route.duration_minutes - reference.duration_minutes,
        feasibility_score=feasibility(
            route.duration_minutes, reference.duration_minutes, WALK_DECAY_MIN
        ),
        description=f"Walk {route.distance_km:.1f} km and save {savings:.2f} kg CO₂",
    )


def _cycle(route: ProviderRoute, reference: RouteCandidate) -> EcoSuggestion:
    savings = calculate_savings(reference.co2_kg, 0.0)
    return EcoSuggestion(
        type=SuggestionType.cycle,
        distance_km=route.distance_km,
        duration_minutes=route.duration_minutes,
        co2_savings_kg=savings,
        time_difference_minutes=route.duration_minutes - reference.duration_minutes,
        feasibility_score=feasibility(
            route.duration_minutes, reference.duration_minutes, CYCLE_DECAY_MIN
        ),
        description=f"Cycle {route.distance_km:.1f} km and save {savings:.2f} kg CO₂",
    )


def _transit(route: ProviderRoute, reference: RouteCandidate) -> Optional[EcoSuggestion]:
    savings = calculate_savings(
        reference.co2_kg, mode_co2_kg(route.distance_km, TravelMode.transit)
    )
    if savings <= 0:
        return None
    return EcoSuggestion(
        type=SuggestionType.transit,
        distance_km=route.distance_km,
        duration_minutes=route.duration_minutes,
        co2_savings_kg=savings,
        time_difference_minutes=route.duration_minutes - reference.duration_minutes,
        feasibility_score=feasibility(
            route.duration_minutes, reference.duration_minutes, TRANSIT_DECAY_MIN
        ),
        description=f"Take public transit and save {savings:.2f} kg CO₂",
    )


def _carpool(reference: RouteCandidate) -> EcoSuggestion:
    savings = calculate_savings(
        reference.co2_kg, reference.co2_kg * CARPOOL_EMISSION_SHARE
    )
    return EcoSuggestion(
        type=SuggestionType.carpool,
        distance_km=reference.distance_km,
        duration_minutes=reference.duration_minutes * (1 + CARPOOL_TIME_PENALTY),
        co2_savings_kg=savings,
        time_difference_minutes=reference.duration_minutes * CARPOOL_TIME_PENALTY,
        feasibility_score=CARPOOL_FEASIBILITY,
        description=f"Carpool with others and save {savings:.2f} kg CO₂",
    )
