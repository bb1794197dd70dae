"""Application routers.

- frontend_router: resolver and routes feed under the JSON:API base path
- system_router: root and health endpoints
"""

from src.presentation.routers.api.frontend import frontend_router
from src.presentation.routers.system import system_router

__all__ = ["frontend_router", "system_router"]
