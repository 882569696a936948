"""translated_routes - localized URL segments for FastAPI/Starlette apps.

Maps locale-neutral route keys ("blog/{slug}") to locale-specific URI
patterns and strips locale prefixes from incoming URLs.

Usage:
    from translated_routes import create_translator

    translator = create_translator()
    translator.translate("about", "tr")             # "hakkimizda"
    translator.get_non_localized_url("/tr/about")   # "/about"
"""

from translated_routes.errors import (
    CommandError,
    RouteSourceError,
    TranslatedRoutesError,
)
from translated_routes.i18n import (
    LocaleDescriptor,
    LocaleRegistry,
    RouteMapLoader,
    RouteTranslator,
    YAMLRouteMapLoader,
)
from translated_routes.i18n.factory import create_translator

__version__ = "1.0.0"

__all__ = [
    "CommandError",
    "RouteSourceError",
    "TranslatedRoutesError",
    "LocaleDescriptor",
    "LocaleRegistry",
    "RouteMapLoader",
    "RouteTranslator",
    "YAMLRouteMapLoader",
    "create_translator",
]
