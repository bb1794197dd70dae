"""Content adapters.

- ContentCatalog: in-memory EntityRepository/AliasRepository/RouteTable/RedirectLookup
- CatalogViewRegistry: ViewRegistry over a catalog
- CatalogAccessChecker: identity-aware AccessChecker
- ContextVarLanguageManager: site languages and negotiation
- load_snapshot: seed a catalog from JSON
"""

from src.infrastructure.content.access_checker import CatalogAccessChecker
from src.infrastructure.content.languages import ContextVarLanguageManager
from src.infrastructure.content.memory_catalog import (
    LANGUAGE_NEUTRAL,
    CatalogViewRegistry,
    ContentCatalog,
)
from src.infrastructure.content.snapshot_loader import load_snapshot

__all__ = [
    "CatalogAccessChecker",
    "CatalogViewRegistry",
    "ContentCatalog",
    "ContextVarLanguageManager",
    "LANGUAGE_NEUTRAL",
    "load_snapshot",
]
