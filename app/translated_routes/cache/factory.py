"""Route cache store factory."""

from typing import Optional

from translated_routes.cache.base import RouteCacheStore
from translated_routes.cache.memory import InMemoryRouteCache
from translated_routes.configuration import Settings, get_settings
from translated_routes.logging import get_module_logger

logger = get_module_logger()


def get_cache_store(settings: Optional[Settings] = None) -> RouteCacheStore:
    """Build the persistent cache store selected by configuration.

    Args:
        settings: Settings instance; the cached singleton when omitted.

    Returns:
        InMemoryRouteCache or DynamoDBRouteCache.
    """
    settings = settings or get_settings()
    backend = settings.routes.CACHE_BACKEND

    if backend == "dynamodb":
        # boto3 is only imported when the dynamodb backend is selected
        from translated_routes.cache.dynamodb import DynamoDBRouteCache

        store: RouteCacheStore = DynamoDBRouteCache(
            table_name=settings.routes.CACHE_TABLE,
            region_name=settings.AWS_REGION,
            default_ttl_seconds=settings.routes.CACHE_TTL,
        )
    else:
        store = InMemoryRouteCache()

    logger.info("initialized_route_cache_store", backend=backend)
    return store
