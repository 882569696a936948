"""Route cache store abstract base class."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional



class RouteCacheStore(ABC):
    """Abstract base class for RouteMap cache stores.

    The RouteTranslator keeps one store as its in-process tier and, when the
    cache is enabled, a second one as its persistent tier. Both are driven
    through this interface only.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, str]]:
        """Get the cached RouteMap for a key.

        Args:
            key: Cache key (e.g. "translated_routes.tr").

        Returns:
            Cached RouteMap or None if not found/expired.
        """
        pass

    @abstractmethod
    def set(
        self, key: str, routes: Dict[str, str], ttl_seconds: Optional[int] = None
    ) -> None:
        """Cache a RouteMap under a key.

        Args:
            key: Cache key.
            routes: RouteMap to cache. Replaces any previous entry.
            ttl_seconds: Time-to-live in seconds; None means no expiry.
        """
        pass

    @abstractmethod
    def forget(self, key: str) -> bool:
        """Evict a key.

        Returns:
            True if an entry was removed, False if there was nothing to evict.
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Evict every entry held by this store."""
        pass

    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics (implementation-specific)."""
        pass

    def remember(
        self,
        key: str,
        ttl_seconds: Optional[int],
        factory: Callable[[], Dict[str, str]],
    ) -> Dict[str, str]:
        """Return the cached RouteMap, computing and storing it on a miss.

        Args:
            key: Cache key.
            ttl_seconds: Expiry applied when the value is computed.
            factory: Called without arguments on a miss.

        Returns:
            The cached or freshly computed RouteMap.
        """
        cached = self.get(key)
        if cached is not None:
            return cached

        routes = factory()
        self.set(key, routes, ttl_seconds)
        return routes
