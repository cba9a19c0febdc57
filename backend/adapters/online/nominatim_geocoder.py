from __future__ import annotations
import logging
from typing import Optional

import httpx

from config import settings
from core.cache import TTLCache, geocode_cache
from core.exceptions import LocationNotFoundError
from core.interfaces import Geocoder
from models.routes import Location

logger = logging.getLogger(__name__)


class NominatimGeocoder(Geocoder):
    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        timeout: Optional[float] = None,
        cache: Optional[TTLCache] = None,
    ):
        self.base_url = (base_url or settings.NOMINATIM_BASE_URL).rstrip("/")
        self.user_agent = user_agent or settings.GEOCODER_USER_AGENT
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT_S
        self.cache = cache if cache is not None else geocode_cache

    async def geocode(self, query: str) -> Location:
        key = " ".join(query.lower().split())
        if not key:
            raise LocationNotFoundError("Address not found: empty query")
        return await self.cache.aget_or_set(key, lambda: self._search(query))

    async def _search(self, query: str) -> Location:
        params = {"q": query, "format": "json", "limit": 1, "addressdetails": 1}
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(
                    f"{self.base_url}/search",
                    params=params,
                    headers={"User-Agent": self.user_agent},
                )
                resp.raise_for_status()
                rows = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("geocoding %r failed: %s", query, e)
            raise LocationNotFoundError(f"Failed to geocode address: {query}") from e

        if not rows:
            raise LocationNotFoundError(f"Address not found: {query}")
        first = rows[0]
        try:
            return Location(
                lat=float(first["lat"]),
                lon=float(first["lon"]),
                label=first.get("display_name") or query,
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error("unusable geocoding result for %r: %s", query, e)
            raise LocationNotFoundError(f"Failed to geocode address: {query}") from e
