"""Operator commands: install, clear, validate, list, export, profile.

Each command is a plain function returning data; ``cli`` wraps them in an
argparse command line.
"""

from translated_routes.commands.cache import clear
from translated_routes.commands.export import export, write_export
from translated_routes.commands.install import install
from translated_routes.commands.listing import list_routes
from translated_routes.commands.models import (
    ProfileReport,
    RouteInfo,
    TranslatedRouteRow,
    ValidationReport,
)
from translated_routes.commands.profile import profile
from translated_routes.commands.validate import validate

__all__ = [
    "clear",
    "export",
    "write_export",
    "install",
    "list_routes",
    "profile",
    "validate",
    "ProfileReport",
    "RouteInfo",
    "TranslatedRouteRow",
    "ValidationReport",
]
