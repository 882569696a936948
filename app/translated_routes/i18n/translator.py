"""Route translation service.

Resolves route keys to their localized patterns, strips locale prefixes from
incoming URLs and owns the two-tier RouteMap cache.
"""

import re
from typing import Dict, Iterable, Optional

from translated_routes.cache.base import RouteCacheStore
from translated_routes.cache.memory import InMemoryRouteCache
from translated_routes.errors import RouteSourceError
from translated_routes.i18n.context import get_current_locale
from translated_routes.i18n.loader import RouteMapLoader
from translated_routes.i18n.matcher import resolve_wildcard
from translated_routes.i18n.models import (
    LocaleInfoSnapshot,
    LocaleRegistry,
    RouteMap,
    cache_key,
)
from translated_routes.logging import get_module_logger

logger = get_module_logger()

DEFAULT_CACHE_TTL = 86400


class RouteTranslator:
    """Service for translating route keys into localized URIs.

    RouteMaps are loaded lazily per locale. The in-process tier
    (``local_cache``) is always used; the persistent tier (``store``) is
    consulted only when ``cache_enabled`` is set. Both tiers are cleared
    together by clear_cache().

    Attributes:
        loader: RouteMapLoader reading the route sources.
        registry: Supported locales.
        store: Persistent RouteCacheStore, or None.
        local_cache: In-process RouteCacheStore keyed by locale code.
        cache_enabled: Whether the persistent tier is used.
        cache_ttl: Persistent tier expiry in seconds.
    """

    def __init__(
        self,
        loader: RouteMapLoader,
        registry: LocaleRegistry,
        store: Optional[RouteCacheStore] = None,
        cache_enabled: bool = True,
        cache_ttl: int = DEFAULT_CACHE_TTL,
        local_cache: Optional[RouteCacheStore] = None,
    ):
        self.loader = loader
        self.registry = registry
        self.store = store
        self.cache_enabled = cache_enabled
        self.cache_ttl = cache_ttl
        self.local_cache = local_cache or InMemoryRouteCache()
        logger.info(
            "initialized_route_translator",
            locales=registry.codes(),
            cache_enabled=cache_enabled,
            persistent_store=store is not None,
        )

    @property
    def default_locale(self) -> Optional[str]:
        return self.registry.default

    def translate(self, key: str, locale: Optional[str] = None) -> str:
        """Translate a route key for a locale.

        Lookup order: exact match, then the first wildcard entry (in RouteMap
        order) whose key matches. Unknown keys and unsupported locales return
        ``key`` unchanged.

        Args:
            key: Route key, e.g. "about" or "blog/{slug}".
            locale: Locale code. Defaults to the current request locale,
                then to the registry default.

        Returns:
            The localized pattern, or ``key`` when there is no translation.
        """
        locale = locale or get_current_locale() or self.default_locale
        if not locale:
            return key

        routes = self._load_routes(locale)

        translation = routes.get(key)
        if translation is not None:
            return translation

        translation = resolve_wildcard(routes, key)
        if translation is not None:
            return translation

        return key

    def get_routes(self, locale: str) -> RouteMap:
        """Get a copy of the (cached) RouteMap for a locale."""
        return dict(self._load_routes(locale))

    def warm(self, locales: Optional[Iterable[str]] = None) -> None:
        """Load RouteMaps ahead of the first request.

        Args:
            locales: Locale codes to load (default: every supported locale).
        """
        locales = list(locales) if locales is not None else self.registry.codes()
        for locale in locales:
            self._load_routes(locale)
        logger.info("warmed_route_cache", locales=locales)

    def get_supported_locales(self) -> Dict[str, Dict[str, str]]:
        """Supported locale code -> ``{"name", "native"}``."""
        return self.registry.to_config()

    def get_locale_data(
        self, current_locale: Optional[str] = None
    ) -> LocaleInfoSnapshot:
        """Describe the supported locales for a client-side rendering layer.

        Args:
            current_locale: Active locale. Defaults to the current request
                locale, then to the registry default.

        Returns:
            ``{"current", "default", "supported": {code: {code, name, native, active}}}``
        """
        current = current_locale or get_current_locale() or self.default_locale
        return {
            "current": current,
            "default": self.default_locale,
            "supported": {
                locale.code: locale.as_dict(active=locale.code == current)
                for locale in self.registry
            },
        }

    def get_non_localized_url(self, url: str) -> str:
        """Strip supported locale segments from a URL path.

        "/tr/about-us" -> "/about-us", "/tr" -> "/". Locales are removed in
        registry order, each one applied to the already-stripped URL.
        """
        for code in self.registry.codes():
            escaped = re.escape(code)
            url = re.sub(rf"^/{escaped}(/|$)", "/", url)
            url = re.sub(rf"/{escaped}(/|$)", "/", url)

        return url.rstrip("/") or "/"

    def clear_cache(self, locale: Optional[str] = None) -> bool:
        """Evict cached RouteMaps from both tiers.

        Args:
            locale: Locale to evict. When omitted, every supported locale is
                evicted from the persistent tier and the in-process tier is
                emptied.

        Returns:
            Always True.
        """
        if locale:
            if self.store is not None:
                self.store.forget(cache_key(locale))
            self.local_cache.forget(locale)
            logger.info("cleared_route_cache", locale=locale)
            return True

        if self.store is not None:
            for code in self.registry.codes():
                self.store.forget(cache_key(code))
        self.local_cache.clear()
        logger.info("cleared_route_cache", locale="*")
        return True

    def _load_routes(self, locale: str) -> RouteMap:
        routes = self.local_cache.get(locale)
        if routes is not None:
            return routes

        try:
            if self.cache_enabled and self.store is not None:
                routes = self.store.remember(
                    cache_key(locale),
                    self.cache_ttl,
                    lambda: self.loader.load(locale),
                )
            else:
                routes = self.loader.load(locale)
        except RouteSourceError as e:
            # not cached, so a fixed source is picked up on the next request
            logger.error(
                "route_source_invalid",
                locale=locale,
                path=e.path,
                error=str(e),
            )
            return {}

        self.local_cache.set(locale, routes)
        logger.debug("loaded_routes", locale=locale, route_count=len(routes))
        return routes
