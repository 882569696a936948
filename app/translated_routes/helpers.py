"""Module-level helpers backed by the application translator."""

from typing import Optional

from translated_routes.services.providers import get_translator


def non_localized_url(url: str) -> str:
    """Strip locale segments from ``url`` ("/tr/about" -> "/about")."""
    return get_translator().get_non_localized_url(url)


def localized_route(key: str, locale: Optional[str] = None) -> str:
    """Translate a route key with the application translator."""
    return get_translator().translate(key, locale)
