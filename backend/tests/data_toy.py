# tests/data_toy.py
from __future__ import annotations

from typing import Dict, List, Optional, Union

from core.exceptions import LocationNotFoundError, RoutingRequestError
from core.interfaces import Geocoder, RoutingProvider
from models.routes import Location, ProviderRoute, TravelMode

# Distances in KM, durations in MINUTES

ORIGIN = Location(lat=52.5200, lon=13.4050, label="Berlin Mitte")
DESTINATION = Location(lat=52.5300, lon=13.5000, label="Berlin Lichtenberg")


def route(mode: TravelMode, distance_km: float, duration_minutes: float, tag: str = "") -> ProviderRoute:
    return ProviderRoute(
        distance_km=distance_km,
        duration_minutes=duration_minutes,
        travel_mode=mode,
        route_data={"tag": tag or f"{mode.value}-{distance_km}"},
    )


# 10 km city trip: two driving alternatives plus one of each other mode
TOY_10KM: Dict[TravelMode, List[ProviderRoute]] = {
    TravelMode.driving: [
        route(TravelMode.driving, 10.0, 20.0, "drive-main"),
        route(TravelMode.driving, 12.0, 18.0, "drive-alt"),
    ],
    TravelMode.walking: [route(TravelMode.walking, 9.0, 110.0)],
    TravelMode.cycling: [route(TravelMode.cycling, 9.5, 35.0)],
    TravelMode.transit: [route(TravelMode.transit, 11.0, 40.0)],
}

# 1.5 km hop: everything is in walking range, too short to carpool
TOY_SHORT: Dict[TravelMode, List[ProviderRoute]] = {
    TravelMode.driving: [route(TravelMode.driving, 1.5, 5.0)],
    TravelMode.walking: [route(TravelMode.walking, 1.4, 18.0)],
    TravelMode.cycling: [route(TravelMode.cycling, 1.5, 6.0)],
    TravelMode.transit: [route(TravelMode.transit, 1.6, 12.0)],
}

Outcome = Union[List[ProviderRoute], Exception]


class FakeRoutingProvider(RoutingProvider):
    """Canned per-mode outcomes; an Exception value is raised for that mode."""

    def __init__(self, outcomes: Dict[TravelMode, Outcome]):
        self.outcomes = outcomes
        self.calls: List[tuple] = []

    async def get_routes(self, origin, destination, mode, alternatives=False):
        self.calls.append((TravelMode(mode), alternatives))
        out = self.outcomes.get(TravelMode(mode), [])
        if isinstance(out, Exception):
            raise out
        return list(out) if alternatives else list(out[:1])

    def calls_for(self, mode: TravelMode) -> int:
        return sum(1 for m, _ in self.calls if m == mode)


def failing(mode: TravelMode) -> RoutingRequestError:
    return RoutingRequestError(f"OSRM routing failed for {mode.value}: NoRoute")


class FakeGeocoder(Geocoder):
    def __init__(self, places: Optional[Dict[str, Location]] = None):
        self.places = places or {"mitte": ORIGIN, "lichtenberg": DESTINATION}

    async def geocode(self, query: str) -> Location:
        loc = self.places.get(query.strip().lower())
        if loc is None:
            raise LocationNotFoundError(f"Address not found: {query}")
        return loc
