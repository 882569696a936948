"""
Type aliases for FastAPI dependency injection.
"""

from typing import Annotated

from fastapi import Depends

from translated_routes.configuration import Settings, get_settings
from translated_routes.i18n.translator import RouteTranslator
from translated_routes.services.providers import get_translator

SettingsDep = Annotated[Settings, Depends(get_settings)]

TranslatorDep = Annotated[RouteTranslator, Depends(get_translator)]

__all__ = [
    "SettingsDep",
    "TranslatorDep",
]
