"""Frontend Route Registry - Single Source of Truth for the frontend routes.

Paths are relative to the JSON:API base path (settings.jsonapi_base_path),
which the router carries as its prefix.

Usage:
    from src.presentation.routers.api.frontend.routes.registry import ROUTE_REGISTRY
"""

from src.presentation.routers.api.frontend.resolver import resolve_path
from src.presentation.routers.api.frontend.routes.metadata import (
    AccessLevel,
    AccessPolicy,
    CachePolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)
from src.presentation.routers.api.frontend.routes_feed import list_routes
from src.schemas.routing_schemas import ResolverResponse, RoutesFeedResponse

ROUTE_REGISTRY: list[RouteMetadata] = [
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/resolve",
        handler=resolve_path,
        resource="resolver",
        tags=["Resolver"],
        summary="Resolve path",
        description=(
            "Resolve a frontend path to the entity, view, redirect or CMS route "
            "behind it. Unknown and inaccessible paths both answer resolved=false."
        ),
        operation_id="resolve_path",
        response_model=ResolverResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=400, description="Missing path query parameter"),
        ],
        access_policy=AccessPolicy(level=AccessLevel.PUBLIC),
        cache_policy=CachePolicy.ANONYMOUS_MAX_AGE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/routes",
        handler=list_routes,
        resource="routes",
        tags=["Routes feed"],
        summary="List headless routes",
        description=(
            "Cursor-paginated enumeration of every headless view and entity "
            "route, for static builds. Follow links.next until it is null."
        ),
        operation_id="list_routes",
        response_model=RoutesFeedResponse,
        status_code=200,
        errors=[
            ErrorSpec(status=403, description="Missing or invalid X-Routes-Secret"),
            ErrorSpec(status=404, description="Routes feed disabled"),
            ErrorSpec(status=500, description="Routes feed secret not configured"),
        ],
        access_policy=AccessPolicy(
            level=AccessLevel.ROUTES_SECRET,
            rationale="Build tooling; reveals every headless route",
        ),
        cache_policy=CachePolicy.NO_STORE,
    ),
]
