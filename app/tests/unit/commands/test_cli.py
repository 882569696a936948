"""Unit tests for the translated-routes command line."""

import json
from unittest.mock import patch

import pytest
import yaml

from tests.factories.routes import write_yaml
from translated_routes.commands.cli import build_parser, format_bytes, main

pytestmark = pytest.mark.unit

APP = "tests.fixtures.route_app:app"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SUPPORTED_LOCALES", "FALLBACK_LOCALE", "LANG_PATH"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("TRANSLATED_ROUTES_CACHE_BACKEND", "memory")


def run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestParser:
    """Tests for argument parsing."""

    def test_subcommands(self):
        parser = build_parser()
        args = parser.parse_args(["--lang-path", "x", "list", APP, "--locale", "tr"])
        assert args.command == "list"
        assert args.lang_path == "x"
        assert args.app == APP
        assert args.locale == "tr"

    def test_no_command_prints_help(self, capsys):
        assert run([]) == 0
        assert "translated-routes" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "size, expected",
        [(512, "512.00 B"), (2048, "2.00 KB"), (3 * 1024 * 1024, "3.00 MB")],
    )
    def test_format_bytes(self, size, expected):
        assert format_bytes(size) == expected


class TestInstallCommand:
    """Tests for `translated-routes install`."""

    def test_creates_files(self, tmp_path, capsys):
        assert run(["--lang-path", str(tmp_path), "install"]) == 0

        with open(tmp_path / "tr" / "routes.yml", encoding="utf-8") as f:
            assert yaml.safe_load(f)["about"] == "hakkimizda"
        assert "Created" in capsys.readouterr().out

    def test_prompts_before_overwrite(self, tmp_path):
        write_yaml(tmp_path / "en" / "routes.yml", {"about": "custom"})

        with patch("builtins.input", return_value="n") as mock_input:
            assert run(["--lang-path", str(tmp_path), "install"]) == 0

        mock_input.assert_called_once()
        with open(tmp_path / "en" / "routes.yml", encoding="utf-8") as f:
            assert yaml.safe_load(f) == {"about": "custom"}

    def test_force_overwrites(self, tmp_path):
        write_yaml(tmp_path / "en" / "routes.yml", {"about": "custom"})

        with patch("builtins.input") as mock_input:
            assert run(["--lang-path", str(tmp_path), "install", "--force"]) == 0

        mock_input.assert_not_called()
        with open(tmp_path / "en" / "routes.yml", encoding="utf-8") as f:
            assert yaml.safe_load(f)["about"] == "about"


class TestClearCommand:
    """Tests for `translated-routes clear`."""

    def test_clear_all(self, lang_dir, capsys):
        assert run(["--lang-path", str(lang_dir), "clear"]) == 0
        assert "all locales" in capsys.readouterr().out

    def test_clear_locale(self, lang_dir, capsys):
        assert run(["--lang-path", str(lang_dir), "clear", "tr"]) == 0
        assert "locale: tr" in capsys.readouterr().out

    def test_unsupported_locale_fails(self, lang_dir, capsys):
        assert run(["--lang-path", str(lang_dir), "clear", "de"]) == 1
        assert "not supported" in capsys.readouterr().err


class TestValidateCommand:
    """Tests for `translated-routes validate`."""

    def test_valid(self, tmp_path, capsys):
        write_yaml(tmp_path / "en" / "routes.yml", {"about": "about"})
        write_yaml(tmp_path / "tr" / "routes.yml", {"about": "hakkimizda"})

        assert run(["--lang-path", str(tmp_path), "validate"]) == 0
        assert "All translations are valid" in capsys.readouterr().out

    def test_invalid(self, lang_dir, capsys):
        assert run(["--lang-path", str(lang_dir), "validate"]) == 1

        captured = capsys.readouterr()
        assert "Missing translations in locale 'en':" in captured.out
        assert "  - shop/*/items/*" in captured.out
        assert "Validation failed" in captured.err

    def test_unused_keys_only_warn(self, tmp_path, capsys):
        write_yaml(tmp_path / "en" / "routes.yml", {"about": "about", "old": "old"})
        write_yaml(tmp_path / "tr" / "routes.yml", {"about": "a", "old": "o"})

        assert run(["--lang-path", str(tmp_path), "validate", "--app", APP]) == 0
        assert "  ? old" in capsys.readouterr().out

    def test_malformed_source_fails(self, tmp_path, capsys):
        (tmp_path / "en").mkdir()
        (tmp_path / "en" / "routes.yml").write_text("about: [unclosed")

        assert run(["--lang-path", str(tmp_path), "validate"]) == 1
        assert "Error:" in capsys.readouterr().err


class TestListCommand:
    """Tests for `translated-routes list`."""

    def test_lists_translated_routes(self, lang_dir, capsys):
        assert run(["--lang-path", str(lang_dir), "list", APP, "--locale", "tr"]) == 0

        out = capsys.readouterr().out
        assert "Method" in out
        assert "hakkimizda" in out
        assert "iletisim" in out

    def test_bad_import_string_fails(self, lang_dir, capsys):
        code = run(["--lang-path", str(lang_dir), "list", "tests.fixtures.route_app:nope"])
        assert code == 1
        assert "Error:" in capsys.readouterr().err


class TestExportCommand:
    """Tests for `translated-routes export`."""

    def test_exports_json(self, lang_dir, tmp_path):
        output = tmp_path / "out" / "routes.json"

        assert run(["--lang-path", str(lang_dir), "export", "--output", str(output)]) == 0
        assert json.loads(output.read_text(encoding="utf-8"))["tr"]["about"] == (
            "hakkimizda"
        )

    def test_exports_typescript(self, lang_dir, tmp_path):
        output = tmp_path / "routes.ts"
        argv = ["--lang-path", str(lang_dir), "export", "--format", "ts"]

        assert run(argv + ["--output", str(output)]) == 0
        assert "export type RouteKey" in output.read_text(encoding="utf-8")

    def test_unsupported_format_fails(self, lang_dir, capsys):
        assert run(["--lang-path", str(lang_dir), "export", "--format", "xml"]) == 1
        assert "Unsupported format: xml" in capsys.readouterr().err


class TestProfileCommand:
    """Tests for `translated-routes profile`."""

    def test_prints_results(self, lang_dir, capsys):
        assert run(["--lang-path", str(lang_dir), "profile", "--iterations", "3"]) == 0

        out = capsys.readouterr().out
        assert "Cold Start (first load)" in out
        assert "Recommendations:" in out
        assert "Tested with 3 iterations" in out
