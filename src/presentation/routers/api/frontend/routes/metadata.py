"""Route metadata types for the frontend route registry.

The registry is the single source of truth for the frontend endpoints:
it drives FastAPI route generation, access dependencies and OpenAPI
metadata.

Core types:
    RouteMetadata: Complete route specification
    HTTPMethod: HTTP method enum
    AccessPolicy: Access requirement (public or routes feed secret)
    ErrorSpec: Error response specification for OpenAPI
    CachePolicy: Caching behavior of the response

Usage:
    from src.presentation.routers.api.frontend.routes.metadata import (
        HTTPMethod,
        RouteMetadata,
    )

    metadata = RouteMetadata(
        method=HTTPMethod.GET,
        path="/resolve",
        handler=resolve_path,
        resource="resolver",
        tags=["Resolver"],
        summary="Resolve path",
        access_policy=AccessPolicy(level=AccessLevel.PUBLIC),
        cache_policy=CachePolicy.ANONYMOUS_MAX_AGE,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for frontend routes. Both endpoints are safe reads."""

    GET = "GET"


class AccessLevel(str, Enum):
    """Access levels for routes.

    Attributes:
        PUBLIC: Anyone may call the route.
        ROUTES_SECRET: Feed must be enabled and X-Routes-Secret must match.
    """

    PUBLIC = "public"
    ROUTES_SECRET = "routes_secret"


@dataclass(frozen=True, kw_only=True)
class AccessPolicy:
    """Access policy for a route.

    Attributes:
        level: Access level.
        rationale: Optional explanation shown to registry readers.
    """

    level: AccessLevel
    rationale: str | None = None


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 403)
        description: Human-readable error description
        model: Optional Pydantic model for the response body

    Examples:
        >>> ErrorSpec(status=400, description="Missing path parameter")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


class CachePolicy(str, Enum):
    """HTTP caching behavior of a route.

    Attributes:
        NO_STORE: Cache-Control: no-store, always.
        ANONYMOUS_MAX_AGE: public, max-age=N for anonymous callers when a
            positive max-age is configured, no-store otherwise.
    """

    NO_STORE = "no_store"
    ANONYMOUS_MAX_AGE = "anonymous_max_age"


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for a frontend route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the JSON:API base path
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "resolver")
        tags: OpenAPI tags

    OpenAPI documentation:
        summary, description, operation_id

    Response:
        response_model: Pydantic model documenting the success body
        status_code: Expected success status
        errors: Possible error responses for OpenAPI

    Behavior:
        access_policy: Who may call the route
        cache_policy: How responses are cached
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    access_policy: AccessPolicy
    cache_policy: CachePolicy = CachePolicy.NO_STORE
