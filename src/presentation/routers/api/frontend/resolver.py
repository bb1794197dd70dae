"""Path resolver handler.

Handler function for the resolver endpoint.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    resolve_path - Resolve a frontend path to the resource behind it

Caching:
    Cache-Control: public, max-age=N only for anonymous callers with a
    positive configured max-age, otherwise no-store. The response varies
    by the path and langcode query arguments (part of the URL) and, under
    the "current" langcode fallback, by Accept-Language.
"""

from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.application.queries import ResolvePath
from src.application.queries.handlers.resolve_path_handler import ResolvePathHandler
from src.core.container import (
    get_account_switcher,
    get_frontend_config,
    get_resolve_path_handler,
)
from src.domain.protocols import AccountSwitcher
from src.domain.value_objects import FrontendConfig
from src.presentation.routers.api.frontend.errors import ErrorResponseBuilder
from src.presentation.routers.api.frontend.headers import (
    add_language_vary,
    jsonapi_response,
    request_origin,
    resolver_cache_max_age,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.schemas.routing_schemas import ResolverResponse


async def resolve_path(
    request: Request,
    path: Annotated[
        str | None,
        Query(description="Frontend path to resolve, e.g. /about-us"),
    ] = None,
    langcode: Annotated[
        str | None,
        Query(description="Language for alias lookup and the entity reference"),
    ] = None,
    handler: ResolvePathHandler = Depends(get_resolve_path_handler),
    config: FrontendConfig = Depends(get_frontend_config),
    account_switcher: AccountSwitcher = Depends(get_account_switcher),
) -> JSONResponse:
    """Resolve a frontend path.

    GET {base}/resolve?path=/about-us → 200 OK

    Args:
        request: FastAPI request object.
        path: Path to resolve (required, may carry a query string).
        langcode: Optional language override.
        handler: ResolvePath handler (injected).
        config: Configuration snapshot (injected).
        account_switcher: Current execution identity (injected).

    Returns:
        JSONResponse with a ResolverResponse body. Unresolvable paths
        still answer 200 with resolved=false.
        JSONResponse with a JSON:API error (400) when path is missing.
    """
    if path is None or path.strip() == "":
        return ErrorResponseBuilder.from_application_error(
            error=ApplicationError(
                code=ApplicationErrorCode.QUERY_VALIDATION_FAILED,
                message="Missing required query parameter: path",
            ),
            trace_id=get_trace_id(),
        )

    result = await handler.handle(
        ResolvePath(
            path=path,
            langcode=langcode or None,
            request_origin=request_origin(request),
        )
    )

    response = jsonapi_response(
        ResolverResponse.from_result(result).model_dump(mode="json"),
        max_age=resolver_cache_max_age(config, account_switcher.current_identity()),
    )
    add_language_vary(response, config)
    return response
