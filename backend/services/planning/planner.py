# services/planning/planner.py
from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional, Tuple

from core.exceptions import LocationNotFoundError, RoutingUnavailableError
from core.interfaces import EmissionFactorStore, Geocoder, PreferenceStore, RoutingProvider
from models.planning import (
    AlternativesResult,
    Place,
    PlanningResult,
    PlanRequest,
    SuggestionsResult,
)
from models.preferences import TravelerPreferences
from models.routes import Location, ProviderRoute, TravelMode
from services.planning.aggregator import RouteAggregator
from services.planning.preferences import resolve_for_user
from services.planning.suggestions import SuggestionGenerator

logger = logging.getLogger(__name__)


class TripPlanner:
    """Request-level entry point: geocode, resolve preferences, rank, suggest."""

    def __init__(
        self,
        provider: RoutingProvider,
        factor_store: EmissionFactorStore,
        geocoder: Optional[Geocoder] = None,
        preference_store: Optional[PreferenceStore] = None,
    ):
        self.geocoder = geocoder
        self.preference_store = preference_store
        self.aggregator = RouteAggregator(provider, factor_store)
        self.suggestions = SuggestionGenerator(provider)

    async def _locate(self, place: Place) -> Location:
        if isinstance(place, Location):
            return place
        if self.geocoder is None:
            raise LocationNotFoundError(f"Address not found: {place} (no geocoder configured)")
        return await self.geocoder.geocode(place)

    async def _endpoints(self, req: PlanRequest) -> Tuple[Location, Location]:
        origin, destination = await asyncio.gather(
            self._locate(req.origin), self._locate(req.destination), return_exceptions=True
        )
        for res in (origin, destination):
            if isinstance(res, BaseException):
                raise res
        return origin, destination

    def _preferences(self, req: PlanRequest) -> TravelerPreferences:
        if req.preferences is not None:
            return req.preferences
        return resolve_for_user(self.preference_store, req.user_id)

    async def plan(self, req: PlanRequest) -> PlanningResult:
        origin, destination = await self._endpoints(req)
        prefs = self._preferences(req)
        agg = await self.aggregator.aggregate(origin, destination, req.vehicle, prefs)

        suggestions = []
        if agg.reference_route is not None:
            # reuse the single-best candidates already fetched per mode
            known: Dict[TravelMode, ProviderRoute] = {}
            for c in agg.routes:
                if c.travel_mode != TravelMode.driving and c.travel_mode not in known:
                    known[c.travel_mode] = c
            suggestions = await self.suggestions.generate(
                origin, destination, agg.reference_route, prefs, known=known
            )
        else:
            logger.info("no driving route, skipping eco suggestions")

        return PlanningResult(
            origin=origin,
            destination=destination,
            routes=agg.routes,
            eco_suggestions=suggestions,
            total_co2_saved_kg=agg.total_co2_saved_kg,
        )

    async def alternatives(self, req: PlanRequest) -> AlternativesResult:
        origin, destination = await self._endpoints(req)
        prefs = self._preferences(req)
        mode = req.travel_mode or prefs.default_travel_mode
        agg = await self.aggregator.aggregate(
            origin, destination, req.vehicle, prefs, modes=[mode]
        )
        return AlternativesResult(
            origin=origin,
            destination=destination,
            travel_mode=mode,
            alternatives=agg.routes,
        )

    async def eco_suggestions(self, req: PlanRequest) -> SuggestionsResult:
        origin, destination = await self._endpoints(req)
        prefs = self._preferences(req)
        agg = await self.aggregator.aggregate(
            origin, destination, req.vehicle, prefs, modes=[TravelMode.driving]
        )
        if agg.reference_route is None:
            raise RoutingUnavailableError("Unable to find driving route for comparison")
        suggestions = await self.suggestions.generate(
            origin, destination, agg.reference_route, prefs
        )
        return SuggestionsResult(
            origin=origin,
            destination=destination,
            driving_route=agg.reference_route,
            eco_suggestions=suggestions,
        )
