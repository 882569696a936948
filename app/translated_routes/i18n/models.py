"""Locale and route map models for the route translation engine."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Mapping, Optional, TypedDict

# route key -> localized pattern, insertion order preserved
RouteMap = Dict[str, str]


def cache_key(locale: str) -> str:
    """Persistent cache key for a locale's RouteMap."""
    return f"translated_routes.{locale}"


@dataclass(frozen=True)
class LocaleDescriptor:
    """Display metadata for one supported locale.

    Attributes:
        code: Locale code used in URLs and route sources (e.g. "tr").
        name: English display name (e.g. "Turkish").
        native: Name in the locale's own language (e.g. "Türkçe").
    """

    code: str
    name: str
    native: str

    def as_dict(self, active: bool = False) -> Dict[str, Any]:
        return {
            "code": self.code,
            "name": self.name,
            "native": self.native,
            "active": active,
        }


class SupportedLocaleData(TypedDict):
    code: str
    name: str
    native: str
    active: bool


class LocaleInfoSnapshot(TypedDict):
    current: Optional[str]
    default: Optional[str]
    supported: Dict[str, SupportedLocaleData]


class LocaleRegistry:
    """Ordered, read-only table of supported locales.

    Iteration follows configuration order. The first locale is the default
    unless an explicit default is given.
    """

    def __init__(
        self,
        locales: Optional[Mapping[str, LocaleDescriptor]] = None,
        default: Optional[str] = None,
    ):
        self._locales: Dict[str, LocaleDescriptor] = dict(locales or {})
        self._default = default

    @classmethod
    def from_config(
        cls,
        supported_locales: Mapping[str, Any],
        default: Optional[str] = None,
    ) -> "LocaleRegistry":
        """Build a registry from a code -> properties mapping.

        Properties may be dicts, objects with ``name``/``native`` attributes
        (e.g. LocaleProperties) or None. Missing names fall back to the code.

        Args:
            supported_locales: Ordered mapping of locale code to properties.
            default: Optional default locale code.

        Returns:
            LocaleRegistry preserving the mapping's order.
        """
        locales = {}
        for code, properties in supported_locales.items():
            if isinstance(properties, Mapping):
                name = properties.get("name")
                native = properties.get("native")
            else:
                name = getattr(properties, "name", None)
                native = getattr(properties, "native", None)
            locales[code] = LocaleDescriptor(
                code=code, name=name or code, native=native or code
            )
        return cls(locales, default=default)

    @property
    def default(self) -> Optional[str]:
        """Default locale code (explicit default, else first registered)."""
        if self._default:
            return self._default
        return next(iter(self._locales), None)

    def codes(self) -> List[str]:
        return list(self._locales)

    def get(self, code: str) -> Optional[LocaleDescriptor]:
        return self._locales.get(code)

    def display_names(self) -> Dict[str, str]:
        """Map each locale code to its display name."""
        return {code: locale.name for code, locale in self._locales.items()}

    def to_config(self) -> Dict[str, Dict[str, str]]:
        """Map each locale code to its ``{"name", "native"}`` properties."""
        return {
            code: {"name": locale.name, "native": locale.native}
            for code, locale in self._locales.items()
        }

    def __contains__(self, code: object) -> bool:
        return code in self._locales

    def __iter__(self) -> Iterator[LocaleDescriptor]:
        return iter(self._locales.values())

    def __len__(self) -> int:
        return len(self._locales)
