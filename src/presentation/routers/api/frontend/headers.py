"""Response headers shared by the frontend endpoints."""

from fastapi import Request
from fastapi.responses import JSONResponse

from src.core.constants import JSONAPI_CONTENT_TYPE
from src.domain.entities import Identity
from src.domain.enums import LangcodeFallback
from src.domain.value_objects import FrontendConfig


def resolver_cache_max_age(config: FrontendConfig, identity: Identity) -> int:
    """Shared-cache lifetime for a resolver response.

    Only anonymous responses may be cached, so access-controlled routing
    data never leaks across users.

    Args:
        config: Configuration snapshot.
        identity: Identity the request runs as.

    Returns:
        Max-age in seconds; 0 disables caching.
    """
    if not identity.is_anonymous:
        return 0
    return max(0, config.resolver_cache_max_age)


def jsonapi_response(content: dict, *, max_age: int = 0) -> JSONResponse:
    """JSON response with the JSON:API content type and cache headers.

    Args:
        content: JSON-serializable body.
        max_age: Public cache lifetime; 0 sends no-store.

    Returns:
        JSONResponse ready to return from a route.
    """
    response = JSONResponse(content=content, media_type=JSONAPI_CONTENT_TYPE)
    response.headers["Content-Type"] = JSONAPI_CONTENT_TYPE
    response.headers["X-Content-Type-Options"] = "nosniff"
    if max_age > 0:
        response.headers["Cache-Control"] = f"public, max-age={max_age}"
    else:
        response.headers["Cache-Control"] = "no-store"
    return response


def add_language_vary(response: JSONResponse, config: FrontendConfig) -> None:
    """Vary on Accept-Language when the negotiated language picks the result."""
    if config.langcode_fallback is LangcodeFallback.CURRENT:
        response.headers.append("Vary", "Accept-Language")


def request_origin(request: Request) -> str:
    """Scheme and host of the live request, e.g. "https://cms.example.com"."""
    return f"{request.url.scheme}://{request.url.netloc}"
