"""Translated routes feature settings."""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from translated_routes.configuration.base import FeatureSettings


class LocaleProperties(BaseModel):
    """Display metadata for one supported locale."""

    name: Optional[str] = None
    native: Optional[str] = None


def _default_locales() -> Dict[str, LocaleProperties]:
    return {
        "en": LocaleProperties(name="English", native="English"),
        "tr": LocaleProperties(name="Turkish", native="Türkçe"),
    }


class TranslatedRoutesSettings(FeatureSettings):
    """Route translation configuration.

    Environment Variables:
        SUPPORTED_LOCALES: JSON object of locale code -> {"name", "native"}.
            Key order defines the registry order (default: en, tr)
        TRANSLATED_ROUTES_CACHE: Enable the persistent cache tier (default: true)
        TRANSLATED_ROUTES_CACHE_TTL: Persistent cache expiry in seconds (default: 86400)
        FALLBACK_LOCALE: Default locale code (default: first supported locale)
        LANG_PATH: Directory holding routes.yml or <locale>/routes.yml (default: lang)
        TRANSLATED_ROUTES_CACHE_BACKEND: "memory" or "dynamodb" (default: memory)
        TRANSLATED_ROUTES_CACHE_TABLE: DynamoDB table for the dynamodb backend

    Example:
        ```python
        from translated_routes.configuration import get_settings

        settings = get_settings()
        ttl = settings.routes.CACHE_TTL
        locales = list(settings.routes.SUPPORTED_LOCALES)
        ```
    """

    SUPPORTED_LOCALES: Dict[str, LocaleProperties] = Field(
        default_factory=_default_locales, alias="SUPPORTED_LOCALES"
    )
    CACHE_ENABLED: bool = Field(default=True, alias="TRANSLATED_ROUTES_CACHE")
    CACHE_TTL: int = Field(default=86400, alias="TRANSLATED_ROUTES_CACHE_TTL")
    FALLBACK_LOCALE: Optional[str] = Field(default=None, alias="FALLBACK_LOCALE")
    LANG_PATH: str = Field(default="lang", alias="LANG_PATH")
    CACHE_BACKEND: Literal["memory", "dynamodb"] = Field(
        default="memory", alias="TRANSLATED_ROUTES_CACHE_BACKEND"
    )
    CACHE_TABLE: str = Field(
        default="translated_routes_cache", alias="TRANSLATED_ROUTES_CACHE_TABLE"
    )

    @field_validator("SUPPORTED_LOCALES", mode="before")
    @classmethod
    def validate_supported_locales(cls, v):
        """Accept bare locale lists (["en", "tr"]) as well as mappings."""
        if v is None:
            return {}
        if isinstance(v, (list, tuple)):
            return {code: {} for code in v}
        return v

    @field_validator("CACHE_TTL")
    @classmethod
    def validate_cache_ttl(cls, v: int) -> int:
        """Reject negative expiries."""
        if v < 0:
            raise ValueError("TRANSLATED_ROUTES_CACHE_TTL must be >= 0")
        return v

    @property
    def default_locale(self) -> Optional[str]:
        """Configured fallback locale, or the first supported locale."""
        if self.FALLBACK_LOCALE:
            return self.FALLBACK_LOCALE
        return next(iter(self.SUPPORTED_LOCALES), None)
