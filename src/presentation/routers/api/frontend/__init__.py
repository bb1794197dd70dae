"""Frontend routers.

All routes are generated from the frontend route registry at startup
(see routes/registry.py) under the JSON:API base path:

    {base}/resolve   - Path resolver
    {base}/routes    - Routes feed (shared-secret guarded)
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.frontend.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.frontend.routes.registry import ROUTE_REGISTRY

frontend_router = APIRouter(prefix=settings.jsonapi_base_path)
register_routes_from_registry(frontend_router, ROUTE_REGISTRY)

__all__ = [
    "frontend_router",
]
