"""Shared fixtures for translated_routes tests.

Provides route source directories in both supported layouts, a locale
registry and a loader that counts how often each locale is read.
"""

import pytest

from tests.factories.routes import (
    EN_ROUTES,
    TR_ROUTES,
    CountingLoader,
    make_registry,
    write_yaml,
)
from translated_routes.cache import InMemoryRouteCache
from translated_routes.configuration import get_settings
from translated_routes.i18n import RouteTranslator
from translated_routes.services import get_translator


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset lru_cache singletons so env changes are seen by each test."""
    get_settings.cache_clear()
    get_translator.cache_clear()
    yield
    get_settings.cache_clear()
    get_translator.cache_clear()


@pytest.fixture
def lang_dir(tmp_path):
    """Per-locale layout: lang/en/routes.yml and lang/tr/routes.yml."""
    lang = tmp_path / "lang"
    write_yaml(lang / "en" / "routes.yml", EN_ROUTES)
    write_yaml(lang / "tr" / "routes.yml", TR_ROUTES)
    return lang


@pytest.fixture
def combined_lang_dir(tmp_path):
    """Combined layout: lang/routes.yml keyed by locale."""
    lang = tmp_path / "combined"
    write_yaml(lang / "routes.yml", {"en": EN_ROUTES, "tr": TR_ROUTES})
    return lang


@pytest.fixture
def registry():
    return make_registry()


@pytest.fixture
def counting_loader(lang_dir):
    return CountingLoader(lang_dir)


@pytest.fixture
def persistent_store():
    return InMemoryRouteCache()


@pytest.fixture
def translator(counting_loader, registry, persistent_store):
    return RouteTranslator(
        loader=counting_loader,
        registry=registry,
        store=persistent_store,
        cache_enabled=True,
        cache_ttl=86400,
    )
