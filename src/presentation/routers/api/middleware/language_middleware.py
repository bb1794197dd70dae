"""Content language negotiation middleware.

Negotiates the request's content language from Accept-Language against
the site languages and stores it for the request, where
LanguageManager.current_content_langcode() picks it up. The resolver
uses it when the langcode fallback policy is "current".
"""

from __future__ import annotations

from typing import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.infrastructure.content.languages import ContextVarLanguageManager


class LanguageNegotiationMiddleware(BaseHTTPMiddleware):
    """Set the negotiated content language for each request.

    Args:
        app: ASGI application.
        languages: Factory returning the site language manager, resolved on
            first request so the catalog is not loaded at import time.
    """

    def __init__(
        self, app, languages: Callable[[], ContextVarLanguageManager]
    ) -> None:
        super().__init__(app)
        self._languages = languages

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        manager = self._languages()
        langcode = manager.negotiate(request.headers.get("Accept-Language"))
        token = manager.set_current(langcode)
        try:
            return await call_next(request)
        finally:
            manager.reset_current(token)
