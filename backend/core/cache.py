# core/cache.py
import time
from collections import OrderedDict
from typing import Any, Awaitable, Callable, Generic, Optional, Tuple, TypeVar

from config import settings

V = TypeVar("V")


class TTLCache(Generic[V]):
    """Tiny in-process cache with per-entry expiry and oldest-first eviction."""

    def __init__(
        self,
        ttl_seconds: float = 60,
        maxsize: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl = ttl_seconds
        self.maxsize = maxsize
        self._clock = clock
        self._store: "OrderedDict[str, Tuple[float, V]]" = OrderedDict()

    def get(self, key: str) -> Optional[V]:
        rec = self._store.get(key)
        if rec is None:
            return None
        expires, val = rec
        if expires <= self._clock():
            self._store.pop(key, None)
            return None
        return val

    def set(self, key: str, val: V) -> None:
        self._store.pop(key, None)
        while len(self._store) >= self.maxsize:
            self._store.popitem(last=False)
        self._store[key] = (self._clock() + self.ttl, val)

    async def aget_or_set(self, key: str, creator: Callable[[], Awaitable[V]]) -> V:
        hit = self.get(key)
        if hit is not None:
            return hit
        val = await creator()
        self.set(key, val)
        return val

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)


# geocoding results are stable enough to share across requests
geocode_cache: TTLCache[Any] = TTLCache(ttl_seconds=settings.GEOCODE_CACHE_TTL_S)
