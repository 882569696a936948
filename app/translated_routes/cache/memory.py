"""In-memory route cache store."""

import threading
import time
from typing import Any, Dict, Optional, Tuple

from translated_routes.cache.base import RouteCacheStore


class InMemoryRouteCache(RouteCacheStore):
    """Process-local RouteMap store with optional per-entry expiry.

    Entries are copied when stored, so later changes to the caller's dict do
    not leak into the cache. Reads return the stored RouteMap itself and
    must be treated as read-only.
    """

    def __init__(self, clock=time.monotonic):
        self._entries: Dict[str, Tuple[Dict[str, str], Optional[float]]] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self.hits = 0
        self.misses = 0

    def _live_entry(self, key: str) -> Optional[Dict[str, str]]:
        # caller holds self._lock; expired entries are dropped here
        entry = self._entries.get(key)
        if entry is None:
            return None

        routes, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return None
        return routes

    def get(self, key: str) -> Optional[Dict[str, str]]:
        with self._lock:
            routes = self._live_entry(key)
            if routes is None:
                self.misses += 1
                return None

            self.hits += 1
            return routes

    def set(
        self, key: str, routes: Dict[str, str], ttl_seconds: Optional[int] = None
    ) -> None:
        expires_at = None
        if ttl_seconds is not None:
            expires_at = self._clock() + ttl_seconds
        with self._lock:
            self._entries[key] = (dict(routes), expires_at)

    def forget(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def keys(self):
        with self._lock:
            return list(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return isinstance(key, str) and self._live_entry(key) is not None

    def get_stats(self) -> Dict[str, Any]:
        with self._lock:
            entries = len(self._entries)
        return {
            "backend": "memory",
            "entries": entries,
            "hits": self.hits,
            "misses": self.misses,
        }
