"""Serialize route translations for front-end code.

Every format carries the same locale -> {route key -> pattern} data that the
RouteTranslator serves; the module formats add a ``getRoute(key, locale)``
accessor that falls back to the key.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from translated_routes.errors import CommandError
from translated_routes.i18n.loader import RouteMapLoader
from translated_routes.i18n.models import RouteMap

FORMATS = ("json", "js", "ts")

DEFAULT_OUTPUT_DIR = Path("public") / "translations"


def default_output_path(fmt: str) -> Path:
    extension = fmt if fmt in FORMATS else "json"
    return DEFAULT_OUTPUT_DIR / f"routes.{extension}"


def _compact_json(translations: Dict[str, RouteMap]) -> str:
    return json.dumps(translations, ensure_ascii=False, separators=(",", ":"))


def _quoted_union(values: Iterable[str]) -> str:
    return " | ".join(json.dumps(value, ensure_ascii=False) for value in values)


def export_json(translations: Dict[str, RouteMap], generated_at: str = "") -> str:
    return json.dumps(translations, ensure_ascii=False, indent=4)


def export_javascript(translations: Dict[str, RouteMap], generated_at: str = "") -> str:
    return f"""// Auto-generated translated routes
// Generated at: {generated_at}

export const translatedRoutes = {_compact_json(translations)};

export function getRoute(key, locale = 'en') {{
  return translatedRoutes[locale]?.[key] || key;
}}

export default translatedRoutes;
"""


def export_typescript(translations: Dict[str, RouteMap], generated_at: str = "") -> str:
    first_locale = next(iter(translations), None)
    keys = list(translations.get(first_locale) or {}) if first_locale else []
    key_type = _quoted_union(keys) if keys else "string"
    locale_type = _quoted_union(translations) if translations else "string"

    return f"""// Auto-generated translated routes
// Generated at: {generated_at}

export type RouteKey = {key_type};

export type Locale = {locale_type};

export interface TranslatedRoutes {{
  [locale: string]: {{
    [key: string]: string;
  }};
}}

export const translatedRoutes: TranslatedRoutes = {_compact_json(translations)};

export function getRoute(key: RouteKey, locale: Locale = 'en'): string {{
  return translatedRoutes[locale]?.[key] || key;
}}

export default translatedRoutes;
"""


EXPORTERS: Dict[str, Callable[[Dict[str, RouteMap], str], str]] = {
    "json": export_json,
    "js": export_javascript,
    "ts": export_typescript,
}


def export(
    loader: RouteMapLoader,
    locales: Iterable[str],
    fmt: str = "json",
    generated_at: Optional[str] = None,
) -> str:
    """Render every locale's routes in the requested format.

    Locales without a route source are omitted unless the combined source
    lists them.

    Raises:
        CommandError: If ``fmt`` is not one of json, js, ts.
    """
    exporter = EXPORTERS.get(fmt)
    if exporter is None:
        raise CommandError(f"Unsupported format: {fmt}")

    translations = loader.load_all(list(locales))
    if generated_at is None:
        generated_at = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    return exporter(translations, generated_at)


def write_export(content: str, output: Path) -> Path:
    output = Path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    return output
