"""Route map loading interface and implementations.

Defines the contract for reading RouteMaps from their source of truth and
provides the YAML-based loader. Loaders know nothing about caching; the
RouteTranslator layers caching on top.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import structlog
import yaml

from translated_routes.errors import RouteSourceError
from translated_routes.i18n.models import RouteMap

logger = structlog.get_logger()

ROUTES_FILENAME = "routes.yml"

NULL_TAG = "tag:yaml.org,2002:null"


class RouteSourceLoader(yaml.SafeLoader):
    """SafeLoader that keeps every plain scalar a string, except null.

    Locale codes and route keys such as "no" or "on" stay strings instead of
    becoming booleans.
    """


RouteSourceLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag == NULL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class RouteMapLoader(ABC):
    """Abstract base for route map loaders."""

    @abstractmethod
    def load(self, locale: str) -> RouteMap:
        """Load the RouteMap for one locale.

        Args:
            locale: Locale code.

        Returns:
            RouteMap, empty when the locale has no source.

        Raises:
            RouteSourceError: If a source exists but cannot be parsed.
        """
        pass

    @abstractmethod
    def load_all(self, locales: Iterable[str]) -> Dict[str, RouteMap]:
        """Load every available RouteMap.

        Args:
            locales: Locale codes to look for when sources are per-locale.

        Returns:
            Dict mapping locale code to RouteMap.
        """
        pass


class YAMLRouteMapLoader(RouteMapLoader):
    """Loader for YAML route files.

    Two layouts are supported, queried in this order:

    1. ``<lang_path>/routes.yml`` holding every locale::

           en:
             about: about
           tr:
             about: hakkimizda

    2. ``<lang_path>/<locale>/routes.yml`` holding one locale::

           about: hakkimizda
           blog/*: blog/*

    When the combined file exists, per-locale files are never read.

    Attributes:
        lang_path: Directory containing the route files.
    """

    def __init__(self, lang_path: Path):
        self.lang_path = Path(lang_path)

    @property
    def combined_path(self) -> Path:
        return self.lang_path / ROUTES_FILENAME

    def locale_path(self, locale: str) -> Path:
        return self.lang_path / locale / ROUTES_FILENAME

    def load(self, locale: str) -> RouteMap:
        combined = self._read_combined()
        if combined is not None:
            return combined.get(locale, {})

        path = self.locale_path(locale)
        if not path.is_file():
            logger.debug("route_source_missing", locale=locale, path=str(path))
            return {}

        routes = self._to_route_map(self._read_yaml(path), path)
        logger.info(
            "loaded_route_map",
            locale=locale,
            path=str(path),
            route_count=len(routes),
        )
        return routes

    def load_all(self, locales: Iterable[str]) -> Dict[str, RouteMap]:
        combined = self._read_combined()
        if combined is not None:
            return combined

        result: Dict[str, RouteMap] = {}
        for locale in locales:
            path = self.locale_path(locale)
            if path.is_file():
                result[locale] = self._to_route_map(self._read_yaml(path), path)
        return result

    def _read_combined(self) -> Optional[Dict[str, RouteMap]]:
        path = self.combined_path
        if not path.is_file():
            return None

        data = self._read_yaml(path)
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.error("invalid_route_source_format", path=str(path), expected="dict")
            raise RouteSourceError(f"Expected a mapping of locales in {path}", str(path))

        combined = {
            str(locale): self._to_route_map(routes, path)
            for locale, routes in data.items()
            if locale is not None
        }
        logger.info(
            "loaded_combined_route_source",
            path=str(path),
            locale_count=len(combined),
        )
        return combined

    def _read_yaml(self, path: Path) -> Any:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.load(f, Loader=RouteSourceLoader)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise RouteSourceError(f"Failed to parse {path}: {e}", str(path)) from e

    def _to_route_map(self, data: Any, path: Path) -> RouteMap:
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.error("invalid_route_source_format", path=str(path), expected="dict")
            raise RouteSourceError(f"Expected a mapping of routes in {path}", str(path))

        routes: RouteMap = {}
        for key, value in data.items():
            # an empty entry ("about:") is an untranslated key
            if key is None or value is None:
                continue
            if not isinstance(value, str):
                logger.error("invalid_route_value", path=str(path), key=str(key))
                raise RouteSourceError(
                    f"Expected a string pattern for {key!r} in {path}", str(path)
                )
            routes[str(key)] = value
        return routes
