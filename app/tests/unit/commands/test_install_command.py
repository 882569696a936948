"""Unit tests for the install command."""

import pytest
import yaml

from translated_routes.commands.install import SAMPLE_ROUTES, install, sample_routes
from translated_routes.errors import CommandError

pytestmark = pytest.mark.unit


def read(path):
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


class TestInstall:
    """Tests for install()."""

    def test_creates_file_per_locale(self, tmp_path):
        written = install(tmp_path, ["en", "tr"])

        assert written == [tmp_path / "en" / "routes.yml", tmp_path / "tr" / "routes.yml"]
        assert read(tmp_path / "tr" / "routes.yml") == SAMPLE_ROUTES["tr"]

    def test_unknown_locale_gets_english_sample(self, tmp_path):
        install(tmp_path, ["de"])
        assert read(tmp_path / "de" / "routes.yml") == SAMPLE_ROUTES["en"]

    def test_no_locales_raises(self, tmp_path):
        with pytest.raises(CommandError):
            install(tmp_path, [])

    def test_existing_file_is_kept_by_default(self, tmp_path):
        path = tmp_path / "en" / "routes.yml"
        path.parent.mkdir()
        path.write_text("about: custom\n")

        assert install(tmp_path, ["en"]) == []
        assert read(path) == {"about": "custom"}

    def test_existing_file_is_replaced_with_overwrite(self, tmp_path):
        path = tmp_path / "en" / "routes.yml"
        path.parent.mkdir()
        path.write_text("about: custom\n")

        assert install(tmp_path, ["en"], overwrite=True) == [path]
        assert read(path) == SAMPLE_ROUTES["en"]

    def test_overwrite_callable_is_asked_per_file(self, tmp_path):
        for locale in ("en", "tr"):
            (tmp_path / locale).mkdir()
            (tmp_path / locale / "routes.yml").write_text("{}\n")
        asked = []

        def confirm(path):
            asked.append(path)
            return path.parent.name == "tr"

        written = install(tmp_path, ["en", "tr"], overwrite=confirm)

        assert asked == [tmp_path / "en" / "routes.yml", tmp_path / "tr" / "routes.yml"]
        assert written == [tmp_path / "tr" / "routes.yml"]

    def test_sample_routes_returns_copy(self):
        sample_routes("en")["about"] = "changed"
        assert SAMPLE_ROUTES["en"]["about"] == "about"
