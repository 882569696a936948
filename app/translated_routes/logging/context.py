"""Request and locale context for structured logging.

Every log entry carries the locale being served: the ``add_route_locale``
processor reads it from the request-scoped current locale, so translator and
loader events are tagged even when no request context is bound (CLI runs,
warm-up, background jobs using ``use_locale``).

Usage:
    from translated_routes.logging import bind_request_context

    with bind_request_context(request_path="/tr/hakkimizda", locale="tr"):
        logger.info("translating_route")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog
from structlog.typing import EventDict, WrappedLogger

from translated_routes.i18n.context import get_current_locale


def add_route_locale(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor adding ``locale`` from the current request locale.

    A locale passed explicitly to the log call (or bound on the logger)
    takes precedence.
    """
    if "locale" not in event_dict:
        locale = get_current_locale()
        if locale is not None:
            event_dict["locale"] = locale
    return event_dict


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    locale: Optional[str] = None,
) -> Generator[None, None, None]:
    """Bind one request's fields to all logs within the block.

    Args:
        correlation_id: Request identifier, generated when missing.
        request_path: Localized request path, e.g. "/tr/hakkimizda".
        request_method: HTTP method.
        locale: Locale resolved for the request.
    """
    fields = {
        "correlation_id": correlation_id or str(uuid.uuid4()),
        "request_path": request_path,
        "request_method": request_method,
        "locale": locale,
    }
    context = {name: value for name, value in fields.items() if value is not None}

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        structlog.contextvars.unbind_contextvars(*context)


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get("correlation_id")
