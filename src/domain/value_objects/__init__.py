"""Domain value objects.

Immutable values with no identity: configuration snapshot, route keys,
cursor states, keyset queries and resolution results.
"""

from src.domain.value_objects.cursor_state import (
    CursorState,
    EntitiesCursor,
    ViewsCursor,
)
from src.domain.value_objects.entity_query import EntityQuery
from src.domain.value_objects.frontend_config import FrontendConfig
from src.domain.value_objects.resolver_result import (
    EntityRef,
    RedirectTarget,
    ResolverResult,
)
from src.domain.value_objects.route_keys import BundleKey, ViewRouteKey

__all__ = [
    "BundleKey",
    "CursorState",
    "EntitiesCursor",
    "EntityQuery",
    "EntityRef",
    "FrontendConfig",
    "RedirectTarget",
    "ResolverResult",
    "ViewRouteKey",
    "ViewsCursor",
]
