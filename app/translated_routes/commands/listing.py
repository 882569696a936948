"""Tabulate registered routes with their translations."""

from typing import Iterable, List, Optional

from translated_routes.commands.models import RouteInfo, TranslatedRouteRow
from translated_routes.errors import CommandError
from translated_routes.i18n.translator import RouteTranslator


def list_routes(
    translator: RouteTranslator,
    routes: Iterable[RouteInfo],
    locale: Optional[str] = None,
) -> List[TranslatedRouteRow]:
    """Translate each registered route into each locale.

    The root route is skipped. Rows are sorted by locale, then URI.

    Raises:
        CommandError: If ``locale`` is not supported.
    """
    if locale and locale not in translator.registry:
        raise CommandError(f"Locale '{locale}' is not supported.")
    locales = [locale] if locale else translator.registry.codes()

    rows = []
    for route in routes:
        if route.uri == "/":
            continue
        for code in locales:
            rows.append(
                TranslatedRouteRow(
                    method="|".join(route.methods),
                    uri=translator.translate(route.uri, code),
                    name=route.name or "-",
                    locale=code,
                )
            )

    rows.sort(key=lambda row: (row.locale, row.uri))
    return rows
