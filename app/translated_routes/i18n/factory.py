"""Factory functions for creating route translators.

Builds a RouteTranslator wired from Settings: locale registry, YAML loader
and, when enabled, the configured persistent cache store.
"""

from pathlib import Path
from typing import Optional

from translated_routes.cache import RouteCacheStore, get_cache_store
from translated_routes.configuration import Settings, get_settings
from translated_routes.i18n.loader import YAMLRouteMapLoader
from translated_routes.i18n.models import LocaleRegistry
from translated_routes.i18n.translator import RouteTranslator
from translated_routes.logging import get_module_logger

logger = get_module_logger()


def create_registry(settings: Optional[Settings] = None) -> LocaleRegistry:
    """Build the LocaleRegistry from the supported locales setting."""
    settings = settings or get_settings()
    return LocaleRegistry.from_config(
        settings.routes.SUPPORTED_LOCALES,
        default=settings.routes.FALLBACK_LOCALE,
    )


def create_translator(
    settings: Optional[Settings] = None,
    lang_path: Optional[Path] = None,
    store: Optional[RouteCacheStore] = None,
    preload: bool = False,
) -> RouteTranslator:
    """Create and configure a RouteTranslator.

    Args:
        settings: Settings instance (default: cached singleton).
        lang_path: Route source directory (default: settings.routes.LANG_PATH).
        store: Persistent cache store (default: built from settings when the
            cache is enabled).
        preload: Whether to load every supported locale immediately.

    Returns:
        RouteTranslator: Configured translator instance

    Usage:
        translator = create_translator()
        translator.translate("about", "tr")

        # Custom route directory, eager loading
        translator = create_translator(lang_path=Path("resources/lang"), preload=True)
    """
    settings = settings or get_settings()
    lang_path = Path(lang_path or settings.routes.LANG_PATH)

    if store is None and settings.routes.CACHE_ENABLED:
        store = get_cache_store(settings)

    translator = RouteTranslator(
        loader=YAMLRouteMapLoader(lang_path),
        registry=create_registry(settings),
        store=store,
        cache_enabled=settings.routes.CACHE_ENABLED,
        cache_ttl=settings.routes.CACHE_TTL,
    )

    if preload:
        translator.warm()

    logger.info(
        "route_translator_created",
        lang_path=str(lang_path),
        preload=preload,
    )
    return translator
