# census_geocoder/geocode/cache.py
import logging
import threading
import time
from typing import Any, Callable, Optional, Protocol

from cachetools import TLRUCache

from census_geocoder.core.config import settings

logger = logging.getLogger(__name__)


class Cache(Protocol):
    def get(self, key: str) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class _Entry:
    __slots__ = ("value", "ttl")

    def __init__(self, value, ttl: float):
        self.value = value
        self.ttl = ttl


class MemoryCache:
    """
    In-memory key/value store with per-entry expiry, backed by cachetools.
    Entries live `ttl` seconds unless set() is given its own ttl.
    """

    def __init__(self, ttl: float = 60 * 60 * 24, maxsize: int = 10_000,
                 timer: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self._lock = threading.Lock()
        self._data = TLRUCache(
            maxsize=maxsize,
            ttu=lambda _key, entry, now: now + entry.ttl,
            timer=timer,
        )

    def get(self, key: str) -> Any:
        with self._lock:
            entry = self._data.get(key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        with self._lock:
            self._data[key] = _Entry(value, self.ttl if ttl is None else ttl)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            self._data.expire()
            return len(self._data)


# -------------------------
# Process-wide default store
# -------------------------
_default_cache: Optional[MemoryCache] = None
_default_lock = threading.Lock()


def default_cache() -> MemoryCache:
    global _default_cache
    with _default_lock:
        if _default_cache is None:
            _default_cache = MemoryCache(ttl=settings.cache_ttl, maxsize=settings.cache_maxsize)
        return _default_cache


# -------------------------
# Cache gate: namespaced keys over any get/set store
# -------------------------
class CacheGate:
    def __init__(self, cache: Cache, namespace: str = "geocode"):
        self.cache = cache
        self.namespace = namespace

    def key(self, location: str) -> str:
        return f"{self.namespace}:{location}"

    def get(self, location: str) -> Any:
        hit = self.cache.get(self.key(location))
        logger.debug("cache %s for %r", "hit" if hit is not None else "miss", location)
        return hit

    def set(self, location: str, value: Any) -> None:
        self.cache.set(self.key(location), value)
