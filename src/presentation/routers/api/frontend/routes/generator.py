"""Route generator for the frontend route registry.

Converts declarative RouteMetadata entries into FastAPI routes at
application startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_dependencies: Build FastAPI dependencies from access policy
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    from src.presentation.routers.api.frontend.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.frontend.routes.generator import (
        register_routes_from_registry,
    )

    router = APIRouter(prefix=settings.jsonapi_base_path)
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.frontend.errors import ErrorDocument
from src.presentation.routers.api.frontend.routes.metadata import (
    AccessLevel,
    AccessPolicy,
    ErrorSpec,
    RouteMetadata,
)
from src.presentation.routers.api.middleware.routes_secret_dependencies import (
    require_routes_secret,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        dependencies = _build_dependencies(metadata.access_policy)
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=dependencies,
        )


def _build_dependencies(access_policy: AccessPolicy) -> list[Any]:
    """Build FastAPI dependencies from access policy.

    Access policy mapping:
        PUBLIC: No dependencies
        ROUTES_SECRET: Depends(require_routes_secret)

    Args:
        access_policy: Access policy from RouteMetadata

    Returns:
        List of FastAPI dependencies to inject

    Raises:
        ValueError: Unknown access level (fail closed).
    """
    match access_policy.level:
        case AccessLevel.PUBLIC:
            return []

        case AccessLevel.ROUTES_SECRET:
            return [Depends(require_routes_secret)]

        case _:
            msg = f"Unknown access level: {access_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from error specifications.

    Errors without their own model are documented as ErrorDocument.

    Args:
        errors: List of ErrorSpec from RouteMetadata

    Returns:
        Dict mapping status codes to OpenAPI response entries
    """
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ErrorDocument,
        }
        for error in errors
    }
