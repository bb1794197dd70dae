"""Data Transfer Objects (DTOs) for application layer.

Usage:
    from src.application.dtos import RouteItem, RoutesPage

Note:
    The resolver returns the domain ResolverResult value object directly;
    API schemas (Pydantic models) live in src/schemas.
"""

from src.application.dtos.routing_dtos import RouteItem, RoutesPage

__all__ = [
    "RouteItem",
    "RoutesPage",
]
