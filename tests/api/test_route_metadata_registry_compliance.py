"""Registry compliance tests - prevent drift and ensure completeness.

These tests ensure the frontend route registry remains the single source
of truth by validating that:
1. All frontend routes are registered in the registry (no orphans)
2. All registry entries generate actual routes (no dead entries)
3. Access policies are enforced by the generated dependencies
4. Cache policies match the endpoint's audience

If these tests fail, the registry has drifted from the implementation.
"""

import pytest
from fastapi.routing import APIRoute

from src.core.config import settings
from src.presentation.routers.api.frontend import frontend_router
from src.presentation.routers.api.frontend.routes.generator import _build_dependencies
from src.presentation.routers.api.frontend.routes.metadata import (
    AccessLevel,
    AccessPolicy,
    CachePolicy,
)
from src.presentation.routers.api.frontend.routes.registry import ROUTE_REGISTRY
from src.presentation.routers.api.middleware.routes_secret_dependencies import (
    require_routes_secret,
)


def _api_routes() -> dict[str, APIRoute]:
    return {
        f"{method} {route.path}": route
        for route in frontend_router.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }


class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_routes_match_registry(self):
        """Every frontend route has exactly one registry entry."""
        expected = {
            f"{entry.method.value} {settings.jsonapi_base_path}{entry.path}"
            for entry in ROUTE_REGISTRY
        }

        assert set(_api_routes()) == expected

    def test_operation_ids_are_unique(self):
        """Duplicate operation_ids break the OpenAPI document."""
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]

        assert len(operation_ids) == len(set(operation_ids))


class TestAccessPolicies:
    """Verify access policies become the right dependencies."""

    def test_secret_routes_carry_guard(self):
        routes = _api_routes()

        for entry in ROUTE_REGISTRY:
            route = routes[f"{entry.method.value} {settings.jsonapi_base_path}{entry.path}"]
            guards = [dep.dependency for dep in route.dependencies]
            if entry.access_policy.level is AccessLevel.ROUTES_SECRET:
                assert guards == [require_routes_secret], entry.path
            else:
                assert require_routes_secret not in guards, entry.path

    def test_routes_feed_is_secret_guarded(self):
        (entry,) = [entry for entry in ROUTE_REGISTRY if entry.path == "/routes"]

        assert entry.access_policy.level is AccessLevel.ROUTES_SECRET
        assert entry.cache_policy is CachePolicy.NO_STORE

    def test_unknown_access_level_fails_closed(self):
        with pytest.raises(ValueError):
            _build_dependencies(AccessPolicy(level="admin"))  # type: ignore[arg-type]


class TestErrorDocumentation:
    """Verify documented errors."""

    def test_secret_routes_document_guard_errors(self):
        for entry in ROUTE_REGISTRY:
            if entry.access_policy.level is not AccessLevel.ROUTES_SECRET:
                continue
            assert {error.status for error in entry.errors} >= {403, 404, 500}
