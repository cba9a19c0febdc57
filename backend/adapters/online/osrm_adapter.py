from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import httpx

from config import settings
from core.exceptions import RoutingRequestError
from core.interfaces import RoutingProvider
from models.routes import Location, ProviderRoute, TravelMode

logger = logging.getLogger(__name__)

# OSRM has no transit profile; transit candidates ride the driving graph but
# keep travel_mode=transit so the transit coefficient applies.
PROFILE_MAP: Dict[TravelMode, str] = {
    TravelMode.driving: "driving",
    TravelMode.walking: "foot",
    TravelMode.cycling: "cycling",
    TravelMode.transit: "driving",
}

EMPTY_GEOMETRY = {"type": "LineString", "coordinates": []}


def _instruction(step: Dict[str, Any]) -> str:
    name = step.get("name") or "road"
    maneuver = step.get("maneuver") or {}
    if maneuver.get("type"):
        parts = [maneuver["type"], maneuver.get("modifier") or "", "onto", name]
        return " ".join(p for p in parts if p)
    return step.get("name") or f"Continue on {name}"


def _steps(route: Dict[str, Any]) -> List[Dict[str, Any]]:
    legs = route.get("legs") or []
    if not legs or not isinstance(legs[0].get("steps"), list):
        return []
    out = []
    for step in legs[0]["steps"]:
        text = _instruction(step)
        out.append(
            {
                "distance": step.get("distance"),
                "duration": step.get("duration"),
                "instruction": text,
                "maneuver": step.get("maneuver"),
                "name": step.get("name") or "",
            }
        )
    return out


class OSRMRoutingProvider(RoutingProvider):
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_alternatives: Optional[int] = None,
    ):
        self.base_url = (base_url or settings.OSRM_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_S
        self.max_alternatives = (
            max_alternatives
            if max_alternatives is not None
            else settings.ROUTING_MAX_ALTERNATIVES
        )

    def _url(self, origin: Location, destination: Location, mode: TravelMode) -> str:
        path = f"{origin.lon},{origin.lat};{destination.lon},{destination.lat}"
        return f"{self.base_url}/route/v1/{PROFILE_MAP[mode]}/{path}"

    async def get_routes(
        self,
        origin: Location,
        destination: Location,
        mode: TravelMode,
        alternatives: bool = False,
    ) -> List[ProviderRoute]:
        mode = TravelMode(mode)
        params = {"overview": "full", "geometries": "geojson", "steps": "true"}
        want_alternatives = alternatives and mode == TravelMode.driving
        if want_alternatives:
            params["alternatives"] = str(self.max_alternatives)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(
                    self._url(origin, destination, mode), params=params
                )
                resp.raise_for_status()
                data = resp.json()
        except httpx.HTTPStatusError as e:
            raise RoutingRequestError(
                f"OSRM HTTP {e.response.status_code} for {mode.value}: {e.response.text}"
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            raise RoutingRequestError(f"OSRM request failed for {mode.value}: {e}") from e

        if data.get("code") != "Ok":
            raise RoutingRequestError(
                f"OSRM routing failed for {mode.value}: {data.get('code')}"
            )

        routes = data.get("routes") or []
        if not want_alternatives:
            routes = routes[:1]
        logger.debug("OSRM returned %d %s route(s)", len(routes), mode.value)
        return [self._to_provider_route(r, mode, origin, destination) for r in routes]

    @staticmethod
    def _to_provider_route(
        route: Dict[str, Any],
        mode: TravelMode,
        origin: Location,
        destination: Location,
    ) -> ProviderRoute:
        distance_m = float(route.get("distance") or 0)
        duration_s = float(route.get("duration") or 0)
        return ProviderRoute(
            distance_km=distance_m / 1000.0,
            duration_minutes=duration_s / 60.0,
            travel_mode=mode,
            route_data={
                "geometry": route.get("geometry") or dict(EMPTY_GEOMETRY),
                "legs": [
                    {
                        "distance": route.get("distance"),
                        "duration": route.get("duration"),
                        "steps": _steps(route),
                        "start_address": origin.label or "",
                        "end_address": destination.label or "",
                    }
                ],
                "distance": route.get("distance"),
                "duration": route.get("duration"),
                "origin_coords": origin.as_lonlat(),
                "destination_coords": destination.as_lonlat(),
            },
        )
