# services/planning/aggregator.py
from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional, Sequence

from core.emissions import calculate_savings, vehicle_co2_kg
from core.exceptions import RoutingUnavailableError
from core.interfaces import EmissionFactorStore, RoutingProvider
from models.fleet import VehicleProfile
from models.planning import AggregateResult
from models.preferences import TravelerPreferences
from models.routes import Location, ProviderRoute, RouteCandidate, TravelMode
from services.emissions.calculator import score_candidate

logger = logging.getLogger(__name__)

ALL_MODES: Sequence[TravelMode] = (
    TravelMode.driving,
    TravelMode.walking,
    TravelMode.cycling,
    TravelMode.transit,
)


class RouteAggregator:
    """
    Fans out one routing call per travel mode (driving with alternatives, the
    single best route otherwise), scores every candidate and ranks them by
    eco score. One failing mode is dropped; all modes failing is fatal.
    """

    def __init__(self, provider: RoutingProvider, factor_store: EmissionFactorStore):
        self.provider = provider
        self.factor_store = factor_store

    async def _fetch(
        self, origin: Location, destination: Location, mode: TravelMode
    ) -> List[ProviderRoute]:
        return await self.provider.get_routes(
            origin, destination, mode, alternatives=(mode == TravelMode.driving)
        )

    async def aggregate(
        self,
        origin: Location,
        destination: Location,
        vehicle: Optional[VehicleProfile] = None,
        preferences: Optional[TravelerPreferences] = None,
        modes: Optional[Iterable[TravelMode]] = None,
    ) -> AggregateResult:
        modes = list(dict.fromkeys(TravelMode(m) for m in (modes or ALL_MODES)))
        if not modes:
            raise ValueError("at least one travel mode is required")
        if preferences is not None:
            logger.debug(
                "aggregating %s (prefer_eco_routes=%s)",
                [m.value for m in modes],
                preferences.prefer_eco_routes,
            )

        # An unknown vehicle/fuel combination is fatal; fail before any I/O
        if vehicle is not None and TravelMode.driving in modes:
            vehicle_co2_kg(0.0, vehicle, self.factor_store)

        results = await asyncio.gather(
            *(self._fetch(origin, destination, m) for m in modes),
            return_exceptions=True,
        )

        raw: List[ProviderRoute] = []
        failed = {}
        for mode, res in zip(modes, results):
            if isinstance(res, BaseException):
                if not isinstance(res, Exception):
                    raise res
                logger.warning("%s route unavailable: %s", mode.value, res)
                failed[mode.value] = str(res)
                continue
            if not res:
                logger.info("no %s candidates returned", mode.value)
                continue
            raw.extend(res)

        if len(failed) == len(modes):
            logger.error("routing unavailable for every mode: %s", failed)
            raise RoutingUnavailableError(
                "Routing unavailable: " + "; ".join(f"{m}: {e}" for m, e in failed.items())
            )

        scored = [score_candidate(r, vehicle, self.factor_store) for r in raw]
        reference = _first_driving(scored)
        total_saved = 0.0
        if reference is not None:
            total_saved = sum(
                calculate_savings(reference.co2_kg, c.co2_kg)
                for c in scored
                if c.travel_mode != TravelMode.driving
            )

        # sorted() is stable, ties keep provider order
        routes = sorted(scored, key=lambda c: c.eco_score, reverse=True)
        return AggregateResult(
            routes=routes,
            total_co2_saved_kg=total_saved,
            reference_route=reference,
            failed_modes=failed,
        )


def _first_driving(candidates: List[RouteCandidate]) -> Optional[RouteCandidate]:
    return next((c for c in candidates if c.travel_mode == TravelMode.driving), None)
