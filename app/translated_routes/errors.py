"""Exception types raised by translated_routes.

Lookups never raise: an unknown key or locale returns the input unchanged.
These errors are reserved for malformed route sources and operator tooling.
"""


class TranslatedRoutesError(Exception):
    """Base class for all translated_routes errors."""


class RouteSourceError(TranslatedRoutesError, ValueError):
    """A route source file exists but cannot be parsed into a RouteMap.

    Attributes:
        path: Path of the offending source file.
    """

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class CommandError(TranslatedRoutesError):
    """An operator command was invoked with invalid arguments."""
