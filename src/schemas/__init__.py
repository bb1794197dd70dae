"""Request/response schemas for API endpoints.

Pydantic models for HTTP response serialization. Schemas are kept
separate from domain value objects (HTTP-layer concerns only).

Usage:
    from src.schemas import ResolverResponse, RoutesFeedResponse
"""

from src.schemas.routing_schemas import (
    # Resolver
    EntityRefResponse,
    RedirectResponse,
    ResolverResponse,
    # Routes feed
    RouteItemResponse,
    RoutesFeedLinks,
    RoutesFeedMeta,
    RoutesFeedPageMeta,
    RoutesFeedResponse,
)

__all__ = [
    # Resolver
    "EntityRefResponse",
    "RedirectResponse",
    "ResolverResponse",
    # Routes feed
    "RouteItemResponse",
    "RoutesFeedLinks",
    "RoutesFeedMeta",
    "RoutesFeedPageMeta",
    "RoutesFeedResponse",
]
