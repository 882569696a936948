"""RouteMap cache stores.

Usage:

    from translated_routes.cache import get_cache_store

    store = get_cache_store()
    routes = store.remember("translated_routes.tr", 86400, lambda: loader.load("tr"))
    store.forget("translated_routes.tr")
"""

from translated_routes.cache.base import RouteCacheStore
from translated_routes.cache.factory import get_cache_store
from translated_routes.cache.memory import InMemoryRouteCache

__all__ = [
    "RouteCacheStore",
    "InMemoryRouteCache",
    "get_cache_store",
]
