"""Routes feed shared-secret dependency.

Usage:
    @router.get("/routes", dependencies=[Depends(require_routes_secret)])
    async def list_routes(...):
        ...

Outcomes come from RoutesFeedAccess.verify: 404 when the feed is
disabled, 500 when no secret is configured, 403 on a missing or wrong
X-Routes-Secret header.
"""

from typing import Annotated

from fastapi import Depends, Header, HTTPException

from src.application.services.routes_feed_access import RoutesFeedAccess
from src.core.container import get_routes_feed_access
from src.core.result import Failure
from src.presentation.routers.api.frontend.errors import ErrorResponseBuilder


async def require_routes_secret(
    x_routes_secret: Annotated[
        str | None,
        Header(alias="X-Routes-Secret", description="Routes feed shared secret"),
    ] = None,
    access: RoutesFeedAccess = Depends(get_routes_feed_access),
) -> None:
    """Require the routes feed to be enabled and the shared secret to match.

    Args:
        x_routes_secret: Value of the X-Routes-Secret header.
        access: Routes feed access guard (injected).

    Raises:
        HTTPException 404: Feed disabled.
        HTTPException 500: No secret configured.
        HTTPException 403: Secret missing or wrong.
    """
    result = access.verify(x_routes_secret)
    if isinstance(result, Failure):
        raise HTTPException(
            status_code=ErrorResponseBuilder.get_status_code(result.error.code),
            detail=result.error.message,
        )
