"""Test data factories for deterministic test data generation."""

from tests.factories.routes import (
    EN_ROUTES,
    TR_ROUTES,
    CountingLoader,
    make_registry,
    write_yaml,
)

__all__ = [
    "EN_ROUTES",
    "TR_ROUTES",
    "CountingLoader",
    "make_registry",
    "write_yaml",
]
