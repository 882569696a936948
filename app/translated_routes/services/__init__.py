"""Service providers and FastAPI dependency aliases."""

from translated_routes.services.dependencies import SettingsDep, TranslatorDep
from translated_routes.services.providers import get_translator

__all__ = ["SettingsDep", "TranslatorDep", "get_translator"]
