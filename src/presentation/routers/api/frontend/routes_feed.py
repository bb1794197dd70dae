"""Routes feed handler.

Handler function for the routes feed endpoint, used by static-site
builds to enumerate every headless route.
Routes are registered via ROUTE_REGISTRY in routes/registry.py; the
registry attaches the X-Routes-Secret guard.

Handlers:
    list_routes - One cursor-paginated page of routes

Responses are never cached (always no-store).
"""

import re
from typing import Annotated
from urllib.parse import urlencode

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries import GetRoutesPage
from src.application.queries.handlers.get_routes_page_handler import (
    GetRoutesPageHandler,
    clamp_limit,
)
from src.core.constants import ROUTES_FEED_DEFAULT_LIMIT
from src.core.container import get_get_routes_page_handler
from src.presentation.routers.api.frontend.headers import jsonapi_response
from src.schemas.routing_schemas import RoutesFeedResponse

PAGE_LIMIT_PARAM = "page[limit]"
PAGE_CURSOR_PARAM = "page[cursor]"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_page_limit(raw: str | None) -> int:
    """Read page[limit] leniently and clamp it to [1, 200].

    Missing means the default; text without a leading integer counts as 0
    and clamps to 1.

    Example:
        >>> parse_page_limit(None), parse_page_limit("500"), parse_page_limit("x")
        (50, 200, 1)
    """
    if raw is None:
        return clamp_limit(ROUTES_FEED_DEFAULT_LIMIT)
    match = _LEADING_INT.match(raw)
    return clamp_limit(int(match.group(1)) if match else 0)


def page_link(
    path: str, params: list[tuple[str, str]], limit: int, cursor: str | None
) -> str:
    """Build a feed link with page parameters replaced.

    Args:
        path: Request path.
        params: Request query parameters in order.
        limit: Clamped page size.
        cursor: Cursor to link to, None for the first page.

    Returns:
        Path with a re-encoded query string.
    """
    query = [
        (key, value)
        for key, value in params
        if key not in (PAGE_LIMIT_PARAM, PAGE_CURSOR_PARAM)
    ]
    query.append((PAGE_LIMIT_PARAM, str(limit)))
    if cursor is not None:
        query.append((PAGE_CURSOR_PARAM, cursor))
    return f"{path}?{urlencode(query)}"


async def list_routes(
    request: Request,
    page_limit: Annotated[
        str | None,
        Query(alias=PAGE_LIMIT_PARAM, description="Page size, clamped to 1-200"),
    ] = None,
    page_cursor: Annotated[
        str | None,
        Query(alias=PAGE_CURSOR_PARAM, description="Opaque cursor from links.next"),
    ] = None,
    langcode: Annotated[
        str | None,
        Query(description="Language for route aliases"),
    ] = None,
    handler: GetRoutesPageHandler = Depends(get_get_routes_page_handler),
) -> JSONResponse:
    """List one page of headless routes.

    GET {base}/routes?page[limit]=50 → 200 OK

    Args:
        request: FastAPI request object.
        page_limit: Raw page[limit] value.
        page_cursor: Cursor from a previous page's links.next.
        langcode: Optional language override.
        handler: GetRoutesPage handler (injected).

    Returns:
        JSONResponse with a RoutesFeedResponse body.
    """
    limit = parse_page_limit(page_limit)
    cursor = page_cursor or None

    page = await handler.handle(
        GetRoutesPage(limit=limit, cursor=cursor, langcode=langcode or None)
    )

    params = list(request.query_params.multi_items())
    path = request.url.path
    body = RoutesFeedResponse.from_dto(
        page,
        cursor=cursor,
        self_link=page_link(path, params, limit, cursor),
        next_link=(
            page_link(path, params, limit, page.next_cursor)
            if page.next_cursor
            else None
        ),
    )
    return jsonapi_response(body.model_dump(mode="json", by_alias=True))
