"""``translated-routes`` command line.

Entry point registered in ``pyproject.toml``::

    [project.scripts]
    translated-routes = "translated_routes.commands.cli:main"
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from translated_routes.commands.cache import clear
from translated_routes.commands.export import (
    FORMATS,
    default_output_path,
    export,
    write_export,
)
from translated_routes.commands.install import install
from translated_routes.commands.listing import list_routes
from translated_routes.commands.models import RouteInfo
from translated_routes.commands.profile import profile
from translated_routes.commands.resolve import resolve_app, routes_from_app
from translated_routes.commands.validate import validate
from translated_routes.configuration import get_settings
from translated_routes.errors import CommandError, RouteSourceError
from translated_routes.i18n.factory import create_translator
from translated_routes.i18n.loader import YAMLRouteMapLoader


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="translated-routes",
        description="Manage localized route translations.",
    )
    parser.add_argument(
        "--lang-path",
        default=None,
        help="Route source directory (default: LANG_PATH setting)",
    )
    subparsers = parser.add_subparsers(dest="command")

    install_parser = subparsers.add_parser(
        "install", help="Create route files for all supported locales"
    )
    install_parser.add_argument(
        "--force", action="store_true", help="Overwrite existing route files"
    )

    clear_parser = subparsers.add_parser(
        "clear", help="Clear the translated routes cache"
    )
    clear_parser.add_argument("locale", nargs="?", default=None)

    validate_parser = subparsers.add_parser(
        "validate", help="Validate route translations for consistency"
    )
    validate_parser.add_argument(
        "--app", default=None, help="Import string used to report unused keys"
    )

    list_parser = subparsers.add_parser("list", help="List all translated routes")
    list_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    list_parser.add_argument("--locale", default=None, help="Show one locale only")

    export_parser = subparsers.add_parser(
        "export", help="Export route translations for front-end code"
    )
    export_parser.add_argument("--format", default="json", help="json, js or ts")
    export_parser.add_argument("--output", default=None, help="Output file path")

    profile_parser = subparsers.add_parser(
        "profile", help="Benchmark route translation performance"
    )
    profile_parser.add_argument("--iterations", type=int, default=100)

    return parser


def format_bytes(size: float) -> str:
    units = ["B", "KB", "MB", "GB"]
    index = 0
    while size >= 1024 and index < len(units) - 1:
        size /= 1024
        index += 1
    return f"{size:.2f} {units[index]}"


def print_table(headers: Sequence[str], rows: List[Sequence[str]]) -> None:
    widths = [
        max([len(str(header))] + [len(str(row[i])) for row in rows])
        for i, header in enumerate(headers)
    ]
    fmt = "  ".join(f"{{:<{width}}}" for width in widths)
    print(fmt.format(*headers))
    print("-" * min(sum(widths) + 2 * (len(widths) - 1), 80))
    for row in rows:
        print(fmt.format(*row))


def _lang_path(args: argparse.Namespace) -> Path:
    return Path(args.lang_path or get_settings().routes.LANG_PATH)


def _app_routes(import_string: str) -> List[RouteInfo]:
    try:
        return routes_from_app(resolve_app(import_string))
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        raise CommandError(str(exc)) from exc


def run_install(args: argparse.Namespace) -> int:
    locales = list(get_settings().routes.SUPPORTED_LOCALES)

    def confirm(path: Path) -> bool:
        answer = input(f"Route file {path} already exists. Overwrite? [y/N] ")
        return answer.strip().lower() in ("y", "yes")

    written = install(_lang_path(args), locales, overwrite=args.force or confirm)
    for path in written:
        print(f"✓ Created: {path}")
    print("\nRoute translation files created successfully!")
    return 0


def run_clear(args: argparse.Namespace) -> int:
    translator = create_translator(lang_path=_lang_path(args))
    clear(translator, args.locale)
    if args.locale:
        print(f"✓ Cache cleared for locale: {args.locale}")
    else:
        print("✓ Cache cleared for all locales")
    return 0


def run_validate(args: argparse.Namespace) -> int:
    print("Validating route translations...\n")
    routes = _app_routes(args.app) if args.app else None
    report = validate(
        YAMLRouteMapLoader(_lang_path(args)),
        list(get_settings().routes.SUPPORTED_LOCALES),
        routes=routes,
    )

    sections = [
        ("Missing translations in locale '{locale}':", "-", report.missing),
        (
            "Extra keys in '{locale}' (not in '" + report.base_locale + "'):",
            "+",
            report.extra,
        ),
        (
            "Missing keys in '{locale}' (present in '" + report.base_locale + "'):",
            "-",
            report.missing_from_locale,
        ),
        ("Keys in '{locale}' not used by any route (warning):", "?", report.unused),
    ]
    for title, marker, entries in sections:
        for locale, keys in entries.items():
            print(title.format(locale=locale))
            for key in keys:
                print(f"  {marker} {key}")
            print()

    if not report.is_valid:
        print("✗ Validation failed with errors", file=sys.stderr)
        return 1

    print("✓ All translations are valid!")
    return 0


def run_list(args: argparse.Namespace) -> int:
    translator = create_translator(lang_path=_lang_path(args))
    rows = list_routes(translator, _app_routes(args.app), args.locale)
    if not rows:
        print("No translated routes found.")
        return 0

    print_table(
        ["Method", "URI", "Name", "Locale"],
        [(row.method, row.uri, row.name, row.locale) for row in rows],
    )
    return 0


def run_export(args: argparse.Namespace) -> int:
    if args.format not in FORMATS:
        raise CommandError(f"Unsupported format: {args.format}")

    content = export(
        YAMLRouteMapLoader(_lang_path(args)),
        list(get_settings().routes.SUPPORTED_LOCALES),
        args.format,
    )
    output = write_export(
        content, Path(args.output or default_output_path(args.format))
    )
    print(f"✓ Translations exported to: {output}")
    return 0


def run_profile(args: argparse.Namespace) -> int:
    translator = create_translator(lang_path=_lang_path(args))
    print("Running performance profiling...\n")
    report = profile(translator, args.iterations)

    print("Performance Results:\n")
    print_table(
        ["Metric", "Value"],
        [
            ("Cold Start (first load)", f"{report.cold_start_ms:.2f} ms"),
            ("Warm Cache (avg)", f"{report.warm_cache_ms:.4f} ms"),
            ("Cache Speedup", f"{report.speedup:.0f}x faster"),
        ],
    )
    print()
    print_table(
        ["Metric", "Value"],
        [
            ("Memory Before", format_bytes(report.memory_before)),
            ("Memory After", format_bytes(report.memory_after)),
            ("Memory Used", format_bytes(report.memory_used)),
            ("Per Locale", format_bytes(report.memory_per_locale)),
        ],
    )
    print("\nRecommendations:")
    for ok, message in report.recommendations():
        print(f"  {'✓' if ok else '⚠'} {message}")
    print(f"\nTested with {report.iterations} iterations per benchmark.")
    return 0


COMMANDS = {
    "install": run_install,
    "clear": run_clear,
    "validate": run_validate,
    "list": run_list,
    "export": run_export,
    "profile": run_profile,
}


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry point for the ``translated-routes`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        exit_code = COMMANDS[args.command](args)
    except (CommandError, RouteSourceError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    sys.exit(exit_code)
