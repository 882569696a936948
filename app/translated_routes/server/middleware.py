"""Starlette middleware sharing the request locale."""

from typing import Any, Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware

from translated_routes.i18n.context import use_locale
from translated_routes.i18n.translator import RouteTranslator
from translated_routes.logging import bind_request_context
from translated_routes.services.providers import get_translator

# share(name, value_factory): e.g. a view layer's "share props" hook
ShareCallback = Callable[[str, Callable[[], Any]], None]


class LocaleMiddleware(BaseHTTPMiddleware):
    """Resolve the request locale and expose locale metadata downstream.

    The locale is taken from the first path segment when it is a supported
    code ("/tr/hakkimizda" -> "tr"), otherwise the translator default is
    used. For the rest of the request:

    - ``translate()`` without an explicit locale uses it;
    - ``request.state.locale`` holds ``get_locale_data()``;
    - log entries carry ``locale`` and the request fields;
    - the optional ``share`` collaborator receives ``("locale", factory)``.
    """

    def __init__(
        self,
        app,
        translator: Optional[RouteTranslator] = None,
        share: Optional[ShareCallback] = None,
    ):
        super().__init__(app)
        self.translator = translator
        self.share = share

    def get_translator(self) -> RouteTranslator:
        return self.translator or get_translator()

    def resolve_locale(
        self, translator: RouteTranslator, path: str
    ) -> Optional[str]:
        segment = path.lstrip("/").split("/", 1)[0]
        if segment and segment in translator.registry:
            return segment
        return translator.default_locale

    async def dispatch(self, request, call_next):
        translator = self.get_translator()
        locale = self.resolve_locale(translator, request.url.path)

        with use_locale(locale), bind_request_context(
            correlation_id=request.headers.get("X-Correlation-ID"),
            request_path=request.url.path,
            request_method=request.method,
            locale=locale,
        ):
            request.state.locale = translator.get_locale_data(locale)
            if self.share is not None:
                self.share("locale", lambda: translator.get_locale_data(locale))
            response = await call_next(request)
            return response
