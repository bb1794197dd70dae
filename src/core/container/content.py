"""Content collaborator factories.

Application-scoped singletons around the in-memory content catalog:
- ContentCatalog (seeded from settings.content_snapshot_path, else empty)
- ViewRegistry, RedirectLookup (optional collaborators)
- LanguageManager, AccessChecker
- Resolver extensions (none registered by default)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings
from src.core.container.infrastructure import get_account_switcher
from src.core.result import Failure, Success

if TYPE_CHECKING:
    from src.domain.protocols import (
        AccessChecker,
        RedirectLookup,
        ResolverExtension,
        ViewRegistry,
    )
    from src.infrastructure.content import ContentCatalog, ContextVarLanguageManager


@lru_cache()
def get_content_catalog() -> "ContentCatalog":
    """Get the content catalog singleton (app-scoped).

    Returns:
        Catalog loaded from settings.content_snapshot_path, or an empty one.

    Raises:
        RuntimeError: If the configured snapshot cannot be loaded.
    """
    from src.infrastructure.content import ContentCatalog, load_snapshot

    if not settings.content_snapshot_path:
        return ContentCatalog()

    match load_snapshot(settings.content_snapshot_path):
        case Success(value=catalog):
            return catalog
        case Failure(error=err):
            raise RuntimeError(f"Failed to load content snapshot: {err.message}")


@lru_cache()
def get_view_registry() -> "ViewRegistry | None":
    """Get the view registry (app-scoped, catalog-backed)."""
    from src.infrastructure.content import CatalogViewRegistry

    return CatalogViewRegistry(get_content_catalog())


@lru_cache()
def get_redirect_lookup() -> "RedirectLookup | None":
    """Get the redirect table (app-scoped, catalog-backed)."""
    return get_content_catalog()


@lru_cache()
def get_language_manager() -> "ContextVarLanguageManager":
    """Get the language manager (app-scoped) using the catalog's languages."""
    from src.infrastructure.content import ContextVarLanguageManager

    catalog = get_content_catalog()
    return ContextVarLanguageManager(catalog.default_langcode, catalog.langcodes)


@lru_cache()
def get_access_checker() -> "AccessChecker":
    """Get the access checker (app-scoped)."""
    from src.infrastructure.content import CatalogAccessChecker

    return CatalogAccessChecker(get_account_switcher())


def get_resolver_extensions() -> "list[ResolverExtension]":
    """Resolver extensions, in consultation order. None are registered."""
    return []
