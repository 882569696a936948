"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for the translation engine.
"""

from functools import lru_cache

from translated_routes.i18n.factory import create_translator
from translated_routes.i18n.translator import RouteTranslator


@lru_cache
def get_translator() -> RouteTranslator:
    """
    Get application-scoped route translator singleton.

    The @lru_cache decorator ensures only ONE translator (and therefore one
    in-process route cache) exists per process.

    Application code should use the DI type alias for testability:
        from translated_routes.services import TranslatorDep

        @router.get("/links")
        def links(translator: TranslatorDep):
            return {"about": translator.translate("about")}

    Returns:
        RouteTranslator: Cached translator configured from settings.
    """
    return create_translator()
