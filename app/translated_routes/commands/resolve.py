"""App import resolution for the routing-table commands.

Resolves ``"module:attribute"`` strings to a FastAPI/Starlette application
and reads its registered routes.
"""

import importlib
from typing import Any, List

from starlette.routing import Route, WebSocketRoute

from translated_routes.commands.models import RouteInfo


def resolve_app(import_string: str) -> Any:
    """Resolve an import string to an application object.

    Accepts ``"module:attribute"``; the attribute defaults to ``app``.
    Factory functions (callables without a ``routes`` attribute) are called.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object has no routing table.
    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "app"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    if callable(obj) and not hasattr(obj, "routes"):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if not hasattr(obj, "routes"):
        msg = f"{import_string!r} resolved to {type(obj).__name__}, which has no routes"
        raise TypeError(msg)

    return obj


def routes_from_app(app: Any) -> List[RouteInfo]:
    """Describe the app's path routes as RouteInfo (mounts are skipped)."""
    routes = []
    for route in app.routes:
        if not isinstance(route, (Route, WebSocketRoute)):
            continue
        methods = tuple(sorted(getattr(route, "methods", None) or ()))
        routes.append(
            RouteInfo(
                uri=route.path.strip("/") or "/",
                name=route.name or "",
                methods=methods,
            )
        )
    return routes
