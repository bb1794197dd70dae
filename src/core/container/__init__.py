"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_resolve_path_handler

The container is organized into modules:
- infrastructure: Config snapshot, secrets, logging, account switcher
- content: Content catalog and the collaborators built around it
- routing_handlers: Resolver and routes feed handler factories
"""

from src.core.container.content import (
    get_access_checker,
    get_content_catalog,
    get_language_manager,
    get_redirect_lookup,
    get_resolver_extensions,
    get_view_registry,
)
from src.core.container.infrastructure import (
    get_account_switcher,
    get_frontend_config,
    get_logger,
    get_secrets,
)
from src.core.container.routing_handlers import (
    get_get_routes_page_handler,
    get_resolve_path_handler,
    get_routes_feed_access,
)

__all__ = [
    # Infrastructure
    "get_account_switcher",
    "get_frontend_config",
    "get_logger",
    "get_secrets",
    # Content
    "get_access_checker",
    "get_content_catalog",
    "get_language_manager",
    "get_redirect_lookup",
    "get_resolver_extensions",
    "get_view_registry",
    # Routing handlers
    "get_get_routes_page_handler",
    "get_resolve_path_handler",
    "get_routes_feed_access",
]
