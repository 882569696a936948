"""Route translation engine.

Maps locale-neutral route keys to localized URI patterns and back.

Main components:
- models: LocaleDescriptor, LocaleRegistry, RouteMap
- matcher: wildcard matching and segment substitution
- loader: RouteMapLoader and YAMLRouteMapLoader
- translator: RouteTranslator with two-tier caching
- context: request-scoped current locale
"""

from translated_routes.i18n.context import (
    get_current_locale,
    set_current_locale,
    use_locale,
)
from translated_routes.i18n.loader import RouteMapLoader, YAMLRouteMapLoader
from translated_routes.i18n.models import (
    LocaleDescriptor,
    LocaleInfoSnapshot,
    LocaleRegistry,
    RouteMap,
)
from translated_routes.i18n.translator import RouteTranslator

__all__ = [
    "LocaleDescriptor",
    "LocaleInfoSnapshot",
    "LocaleRegistry",
    "RouteMap",
    "RouteMapLoader",
    "YAMLRouteMapLoader",
    "RouteTranslator",
    "get_current_locale",
    "set_current_locale",
    "use_locale",
]
