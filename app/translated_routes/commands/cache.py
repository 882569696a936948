"""Clear cached route maps."""

from typing import Optional

from translated_routes.errors import CommandError
from translated_routes.i18n.translator import RouteTranslator


def clear(translator: RouteTranslator, locale: Optional[str] = None) -> bool:
    """Clear one locale's cached routes, or every locale's.

    Raises:
        CommandError: If ``locale`` is not supported.
    """
    if locale and locale not in translator.registry:
        raise CommandError(f"Locale '{locale}' is not supported.")
    return translator.clear_cache(locale)
