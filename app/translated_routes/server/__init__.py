"""FastAPI/Starlette integration: locale middleware and route helpers."""

from translated_routes.server.middleware import LocaleMiddleware
from translated_routes.server.routing import (
    translate_path,
    translate_route,
    translate_routes,
)

__all__ = [
    "LocaleMiddleware",
    "translate_path",
    "translate_route",
    "translate_routes",
]
