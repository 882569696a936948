"""Request-scoped current locale.

The LocaleMiddleware sets the locale resolved for the request; translate()
reads it when no explicit locale is passed.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Generator, Optional

_current_locale: ContextVar[Optional[str]] = ContextVar(
    "translated_routes_current_locale", default=None
)


def get_current_locale() -> Optional[str]:
    return _current_locale.get()


def set_current_locale(locale: Optional[str]) -> None:
    _current_locale.set(locale)


@contextmanager
def use_locale(locale: Optional[str]) -> Generator[None, None, None]:
    """Make ``locale`` the current locale for the duration of the block."""
    token = _current_locale.set(locale)
    try:
        yield
    finally:
        _current_locale.reset(token)
