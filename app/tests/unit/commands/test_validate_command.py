"""Unit tests for the validate command."""

import pytest

from tests.factories.routes import write_yaml
from translated_routes.commands.models import RouteInfo
from translated_routes.commands.validate import load_translations, validate
from translated_routes.i18n import YAMLRouteMapLoader

pytestmark = pytest.mark.unit


@pytest.fixture
def loader(tmp_path):
    write_yaml(
        tmp_path / "en" / "routes.yml",
        {"about": "about", "contact": "contact", "blog/*": "blog/*"},
    )
    write_yaml(
        tmp_path / "tr" / "routes.yml",
        {"about": "hakkimizda", "pricing": "fiyatlar", "blog/*": "gunluk/*"},
    )
    return YAMLRouteMapLoader(tmp_path)


class TestLoadTranslations:
    """Tests for load_translations()."""

    def test_missing_source_is_empty(self, loader):
        translations = load_translations(loader, ["en", "de"])
        assert translations["de"] == {}
        assert "about" in translations["en"]


class TestValidate:
    """Tests for validate()."""

    def test_consistent_sources_are_valid(self, lang_dir):
        write_yaml(lang_dir / "tr" / "routes.yml", {"about": "hakkimizda"})
        write_yaml(lang_dir / "en" / "routes.yml", {"about": "about"})

        report = validate(YAMLRouteMapLoader(lang_dir), ["en", "tr"])

        assert report.is_valid
        assert report.base_locale == "en"

    def test_missing_keys_against_union(self, loader):
        report = validate(loader, ["en", "tr"])

        assert report.missing == {"en": ["pricing"], "tr": ["contact"]}
        assert not report.is_valid

    def test_extra_and_absent_against_base_locale(self, loader):
        report = validate(loader, ["en", "tr"])

        assert report.extra == {"tr": ["pricing"]}
        assert report.missing_from_locale == {"tr": ["contact"]}

    def test_locale_without_source(self, loader):
        report = validate(loader, ["en", "tr", "de"])
        assert report.missing["de"] == ["about", "contact", "blog/*", "pricing"]

    def test_unused_keys_are_warnings(self, lang_dir):
        write_yaml(lang_dir / "en" / "routes.yml", {"about": "about", "old": "old"})
        write_yaml(lang_dir / "tr" / "routes.yml", {"about": "a", "old": "o"})
        routes = [RouteInfo(uri="/"), RouteInfo(uri="about", methods=("GET",))]

        report = validate(YAMLRouteMapLoader(lang_dir), ["en", "tr"], routes=routes)

        assert report.unused == {"en": ["old"], "tr": ["old"]}
        assert report.is_valid

    def test_wildcard_keys_are_never_unused(self, loader):
        report = validate(loader, ["en"], routes=[])
        assert report.unused == {"en": ["about", "contact"]}

    def test_no_locales(self, loader):
        report = validate(loader, [])
        assert report.is_valid
        assert report.base_locale == ""
