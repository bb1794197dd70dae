"""System router for non-versioned application endpoints.

Provides the root and health endpoints used by load balancers and
deployment checks. Both are lightweight and side-effect free.
"""

from fastapi import APIRouter

from src.core.config import settings


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Service name, status, version and API base path.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
        "jsonapi_base_path": settings.jsonapi_base_path,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers.

    Returns:
        dict[str, str]: Health status indicator.
    """
    return {"status": "healthy"}
