"""Scaffold per-locale route files."""

from pathlib import Path
from typing import Callable, Iterable, List, Union

import yaml

from translated_routes.errors import CommandError
from translated_routes.i18n.loader import ROUTES_FILENAME
from translated_routes.logging import get_module_logger

logger = get_module_logger()

SAMPLE_ROUTES = {
    "en": {
        "about": "about",
        "contact": "contact",
        "blog": "blog/{slug}",
    },
    "tr": {
        "about": "hakkimizda",
        "contact": "iletisim",
        "blog": "blog/{slug}",
    },
}

OverwritePolicy = Union[bool, Callable[[Path], bool]]


def sample_routes(locale: str) -> dict:
    return dict(SAMPLE_ROUTES.get(locale, SAMPLE_ROUTES["en"]))


def install(
    lang_path: Path,
    locales: Iterable[str],
    overwrite: OverwritePolicy = False,
) -> List[Path]:
    """Create ``<lang_path>/<locale>/routes.yml`` for every locale.

    Args:
        lang_path: Route source directory.
        locales: Supported locale codes.
        overwrite: Whether existing files are replaced; a callable is asked
            per existing file.

    Returns:
        Paths of the files written.

    Raises:
        CommandError: If no locales are configured.
    """
    locales = list(locales)
    if not locales:
        raise CommandError("No supported locales found in configuration.")

    written = []
    for locale in locales:
        path = Path(lang_path) / locale / ROUTES_FILENAME
        if path.exists():
            allowed = overwrite(path) if callable(overwrite) else overwrite
            if not allowed:
                logger.info("skipped_existing_route_file", path=str(path))
                continue

        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                sample_routes(locale), f, allow_unicode=True, sort_keys=False
            )
        written.append(path)
        logger.info("created_route_file", locale=locale, path=str(path))

    return written
