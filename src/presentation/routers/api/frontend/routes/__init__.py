"""Frontend route registry package.

Modules:
    metadata: Core types (RouteMetadata, AccessPolicy, CachePolicy, etc.)
    registry: ROUTE_REGISTRY - List of all route specifications
    generator: register_routes_from_registry() - Generate FastAPI routes
"""

from src.presentation.routers.api.frontend.routes.metadata import (
    AccessLevel,
    AccessPolicy,
    CachePolicy,
    ErrorSpec,
    HTTPMethod,
    RouteMetadata,
)

__all__ = [
    "AccessLevel",
    "AccessPolicy",
    "CachePolicy",
    "ErrorSpec",
    "HTTPMethod",
    "RouteMetadata",
]
