"""Routing handler dependency factories.

Request-scoped handler instances for the two routing operations:
- ResolvePath query (resolver orchestrator)
- GetRoutesPage query (routes feed paginator) and its access guard

Every collaborator arrives through Depends, so tests swap any of them
with app.dependency_overrides.
"""

from typing import TYPE_CHECKING

from fastapi import Depends

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
from src.domain.protocols import (
    AccessChecker,
    AccountSwitcher,
    LanguageManager,
    LoggerProtocol,
    RedirectLookup,
    ResolverExtension,
    SecretsProtocol,
    ViewRegistry,
)
from src.domain.value_objects import FrontendConfig
from src.infrastructure.content import ContentCatalog

if TYPE_CHECKING:
    from src.application.queries.handlers.get_routes_page_handler import (
        GetRoutesPageHandler,
    )
    from src.application.queries.handlers.resolve_path_handler import (
        ResolvePathHandler,
    )
    from src.application.services.routes_feed_access import RoutesFeedAccess


# ============================================================================
# Routing Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_resolve_path_handler(
    config: FrontendConfig = Depends(get_frontend_config),
    catalog: ContentCatalog = Depends(get_content_catalog),
    access: AccessChecker = Depends(get_access_checker),
    languages: LanguageManager = Depends(get_language_manager),
    redirect_lookup: RedirectLookup | None = Depends(get_redirect_lookup),
    views: ViewRegistry | None = Depends(get_view_registry),
    extensions: list[ResolverExtension] = Depends(get_resolver_extensions),
    logger: LoggerProtocol = Depends(get_logger),
) -> "ResolvePathHandler":
    """Get ResolvePath query handler (request-scoped).

    Creates handler with:
    - Catalog as alias repository and route table
    - RouteClassifier, ContentPolicy, LangcodeSelector, RedirectService

    Returns:
        ResolvePathHandler instance.
    """
    from src.application.queries.handlers.resolve_path_handler import (
        ResolvePathHandler,
    )
    from src.application.services.content_policy import ContentPolicy
    from src.application.services.langcode_selector import LangcodeSelector
    from src.application.services.redirect_service import RedirectService
    from src.application.services.route_classifier import RouteClassifier

    return ResolvePathHandler(
        config=config,
        aliases=catalog,
        routes=catalog,
        classifier=RouteClassifier(catalog),
        policy=ContentPolicy(config, access),
        langcodes=LangcodeSelector(config, languages),
        redirects=RedirectService(redirect_lookup, logger),
        views=views,
        extensions=extensions,
    )


async def get_get_routes_page_handler(
    config: FrontendConfig = Depends(get_frontend_config),
    catalog: ContentCatalog = Depends(get_content_catalog),
    access: AccessChecker = Depends(get_access_checker),
    languages: LanguageManager = Depends(get_language_manager),
    account_switcher: AccountSwitcher = Depends(get_account_switcher),
    views: ViewRegistry | None = Depends(get_view_registry),
    logger: LoggerProtocol = Depends(get_logger),
) -> "GetRoutesPageHandler":
    """Get GetRoutesPage query handler (request-scoped).

    Returns:
        GetRoutesPageHandler instance.
    """
    from src.application.queries.handlers.get_routes_page_handler import (
        GetRoutesPageHandler,
    )
    from src.application.services.content_policy import ContentPolicy
    from src.application.services.langcode_selector import LangcodeSelector

    return GetRoutesPageHandler(
        config=config,
        entities=catalog,
        aliases=catalog,
        policy=ContentPolicy(config, access),
        langcodes=LangcodeSelector(config, languages),
        account_switcher=account_switcher,
        logger=logger,
        views=views,
    )


async def get_routes_feed_access(
    config: FrontendConfig = Depends(get_frontend_config),
    secrets: SecretsProtocol = Depends(get_secrets),
    logger: LoggerProtocol = Depends(get_logger),
) -> "RoutesFeedAccess":
    """Get the routes feed access guard (request-scoped)."""
    from src.application.services.routes_feed_access import RoutesFeedAccess

    return RoutesFeedAccess(config=config, secrets=secrets, logger=logger)
