"""Route registration helpers.

Rewrite the paths of FastAPI/Starlette routes through the RouteTranslator,
either one route at a time or for every route registered inside a block::

    with translate_routes(app, translator, locale="tr"):
        app.get("/about")(about)        # served at /hakkimizda
        app.get("/blog/{slug}")(post)
"""

from contextlib import contextmanager
from typing import Generator, Optional

from starlette.routing import BaseRoute, Route, WebSocketRoute, compile_path

from translated_routes.i18n.translator import RouteTranslator
from translated_routes.logging import get_module_logger

logger = get_module_logger()


def translate_path(
    path: str, translator: RouteTranslator, locale: Optional[str] = None
) -> str:
    """Translate a URL path template, keeping its leading slash.

    The route key is the path without surrounding slashes ("/blog/{slug}" ->
    "blog/{slug}"). The root path is never translated.
    """
    key = path.strip("/")
    if not key:
        return path
    return "/" + translator.translate(key, locale).lstrip("/")


def translate_route(
    route: BaseRoute, translator: RouteTranslator, locale: Optional[str] = None
) -> BaseRoute:
    """Rewrite a route's path in place with its localized pattern.

    Routes without a path template (mounts, hosts) are returned untouched.

    Returns:
        The same route object.
    """
    if not isinstance(route, (Route, WebSocketRoute)):
        return route

    original = route.path
    translated = translate_path(original, translator, locale)
    if translated == original:
        return route

    route.path = translated
    (
        route.path_regex,
        route.path_format,
        route.param_convertors,
    ) = compile_path(translated)
    logger.debug(
        "translated_route", original=original, translated=translated, locale=locale
    )
    return route


@contextmanager
def translate_routes(
    router, translator: RouteTranslator, locale: Optional[str] = None
) -> Generator[object, None, None]:
    """Translate every route registered on ``router`` inside the block.

    Args:
        router: FastAPI/Starlette application or APIRouter (anything with a
            ``routes`` list).
        translator: RouteTranslator used for the paths.
        locale: Locale to translate into (default: current/default locale).
    """
    before = len(router.routes)
    yield router
    for route in router.routes[before:]:
        translate_route(route, translator, locale)
