"""Configuration module - public API.

Exports:
    Settings: Main settings class
    TranslatedRoutesSettings: Route translation settings section
    LocaleProperties: Display metadata for a configured locale
    get_settings: Cached settings provider
"""

from translated_routes.configuration.routes import (
    LocaleProperties,
    TranslatedRoutesSettings,
)
from translated_routes.configuration.settings import Settings, get_settings

__all__ = [
    "Settings",
    "TranslatedRoutesSettings",
    "LocaleProperties",
    "get_settings",
]
