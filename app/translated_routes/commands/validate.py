"""Consistency checks across locale route sources."""

from typing import Dict, Iterable, List, Optional

from translated_routes.commands.models import RouteInfo, ValidationReport
from translated_routes.i18n.loader import RouteMapLoader
from translated_routes.i18n.matcher import WILDCARD
from translated_routes.i18n.models import RouteMap


def load_translations(
    loader: RouteMapLoader, locales: List[str]
) -> Dict[str, RouteMap]:
    """Load every locale's routes; locales without a source get an empty map."""
    translations = loader.load_all(locales)
    for locale in locales:
        translations.setdefault(locale, {})
    return translations


def _ordered_union(maps: Iterable[RouteMap]) -> List[str]:
    keys: Dict[str, None] = {}
    for routes in maps:
        keys.update(dict.fromkeys(routes))
    return list(keys)


def validate(
    loader: RouteMapLoader,
    locales: Iterable[str],
    routes: Optional[Iterable[RouteInfo]] = None,
) -> ValidationReport:
    """Check that every locale translates the same set of route keys.

    Args:
        loader: Route source loader.
        locales: Supported locale codes; the first one is the reference.
        routes: Registered routes. When given, non-wildcard keys that no
            route uses are reported in ``unused``.

    Returns:
        ValidationReport.

    Raises:
        RouteSourceError: If a route source cannot be parsed.
    """
    locales = list(locales)
    translations = load_translations(loader, locales)
    report = ValidationReport(base_locale=locales[0] if locales else "")

    all_keys = _ordered_union(translations.values())
    for locale in locales:
        missing = [key for key in all_keys if key not in translations[locale]]
        if missing:
            report.missing[locale] = missing

    if locales:
        base_keys = set(translations[report.base_locale])
        for locale in locales[1:]:
            current = translations[locale]
            extra = sorted(key for key in current if key not in base_keys)
            absent = sorted(key for key in base_keys if key not in current)
            if extra:
                report.extra[locale] = extra
            if absent:
                report.missing_from_locale[locale] = absent

    if routes is not None:
        used = {route.uri for route in routes if route.uri != "/"}
        for locale, locale_routes in translations.items():
            unused = [
                key
                for key in locale_routes
                if WILDCARD not in key and key not in used
            ]
            if unused:
                report.unused[locale] = unused

    return report
