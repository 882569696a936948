"""Structlog configuration for translated_routes.

Log events are snake_case names with keyword fields. Every event is tagged
with the locale being served (see ``add_route_locale``) and, inside a
request, with the fields bound by ``bind_request_context``.

Usage:
    from translated_routes.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("loaded_routes", route_count=12)
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from translated_routes.configuration import get_settings
from translated_routes.logging.context import add_route_locale


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def shared_processors() -> List[Processor]:
    """Processors run for every event before rendering."""
    return [
        structlog.contextvars.merge_contextvars,
        add_route_locale,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Output is suppressed while running under pytest.

    Args:
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production; production renders
            JSON lines, development renders for the console.

    Returns:
        Configured logger instance
    """
    processors = shared_processors()

    if _is_test_environment():
        level = logging.CRITICAL + 1
        processors.append(structlog.processors.KeyValueRenderer())
    else:
        settings = get_settings()
        level_name = (log_level or settings.LOG_LEVEL).upper()
        level = getattr(logging, level_name, logging.INFO)
        prod_mode = settings.is_production if is_production is None else is_production
        processors.append(
            structlog.processors.JSONRenderer()
            if prod_mode
            else structlog.dev.ConsoleRenderer()
        )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=True)

    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Example:
        # In translated_routes/i18n/translator.py
        logger = get_module_logger()
        # context: {"component": "translator",
        #           "module_path": "translated_routes.i18n.translator"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module_name = caller.f_globals.get("__name__") if caller is not None else None
    if not module_name:
        return logger.bind(component="unknown")

    component = module_name.rsplit(".", 1)[-1]
    return logger.bind(component=component, module_path=module_name)
