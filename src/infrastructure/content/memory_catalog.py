"""In-memory content catalog.

Implements every content port (EntityRepository, AliasRepository,
RouteTable, ViewRegistry, RedirectLookup) over plain dictionaries. It
backs local development, seeded from a JSON snapshot, and the HTTP tests.

Routing rules:
    - Explicitly registered routes match their exact internal path.
    - "/node/7" style paths match "entity.{type}.canonical" routes of
      entity types with a canonical template.
    - Page displays of enabled views route at their (normalized) path.
"""

import re
from typing import Any

from src.domain.entities import (
    ContentEntity,
    EntityTypeDefinition,
    RedirectMatch,
    RouteMatch,
    ViewDefinition,
)
from src.domain.path_normalizer import normalize_path
from src.domain.value_objects import EntityQuery

LANGUAGE_NEUTRAL = "und"


def id_sort_key(entity_id: int | str) -> tuple[int, int, str]:
    """Order numeric ids numerically and everything else lexically after them."""
    text = str(entity_id)
    if text.isdigit():
        return (0, int(text), "")
    return (1, 0, text)


class ContentCatalog:
    """Dictionary-backed content store.

    Aliases are stored per langcode; LANGUAGE_NEUTRAL aliases apply to every
    language that has no alias of its own.
    """

    def __init__(self) -> None:
        self._definitions: dict[str, EntityTypeDefinition] = {}
        self._bundles: dict[str, list[str]] = {}
        self._entities: dict[str, dict[str, ContentEntity]] = {}
        self._alias_to_path: dict[tuple[str, str], str] = {}
        self._path_to_alias: dict[tuple[str, str], str] = {}
        self._routes: dict[str, RouteMatch] = {}
        self._views: dict[str, ViewDefinition] = {}
        self._redirects: list[tuple[str, dict[str, str], str, RedirectMatch]] = []
        self.default_langcode = "en"
        self.langcodes: list[str] = ["en"]

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def set_languages(self, default_langcode: str, langcodes: list[str]) -> None:
        self.default_langcode = default_langcode
        self.langcodes = list(dict.fromkeys([default_langcode, *langcodes]))

    def add_entity_type(
        self, definition: EntityTypeDefinition, bundles: list[str] | None = None
    ) -> None:
        self._definitions[definition.id] = definition
        self._bundles[definition.id] = list(bundles or [])
        self._entities.setdefault(definition.id, {})

    def add_entity(self, entity: ContentEntity) -> None:
        """Store an entity.

        Raises:
            KeyError: If its entity type was never added.
        """
        if entity.entity_type_id not in self._definitions:
            raise KeyError(f"Unknown entity type: {entity.entity_type_id}")
        self._entities[entity.entity_type_id][str(entity.id)] = entity

    def add_alias(self, path: str, alias: str, langcode: str = LANGUAGE_NEUTRAL) -> None:
        path, alias = normalize_path(path), normalize_path(alias)
        self._alias_to_path[(langcode, alias)] = path
        self._path_to_alias[(langcode, path)] = alias

    def add_route(self, internal_path: str, match: RouteMatch) -> None:
        self._routes[normalize_path(internal_path)] = match

    def add_view(self, view: ViewDefinition) -> None:
        self._views[view.id] = view

    def add_redirect(
        self,
        source: str,
        to: Any,
        status_code: Any = 301,
        *,
        query: dict[str, str] | None = None,
        langcode: str = LANGUAGE_NEUTRAL,
    ) -> None:
        self._redirects.append(
            (
                normalize_path(source),
                dict(query or {}),
                langcode,
                RedirectMatch(to=to, status_code=status_code),
            )
        )

    # ------------------------------------------------------------------
    # EntityRepository
    # ------------------------------------------------------------------

    async def get_definition(self, entity_type_id: str) -> EntityTypeDefinition | None:
        return self._definitions.get(entity_type_id)

    async def list_definitions(self) -> list[EntityTypeDefinition]:
        return list(self._definitions.values())

    async def get_bundles(self, entity_type_id: str) -> list[str]:
        return list(self._bundles.get(entity_type_id, []))

    async def load(self, entity_type_id: str, entity_id: int | str) -> ContentEntity | None:
        return self._entities.get(entity_type_id, {}).get(str(entity_id))

    async def load_multiple(
        self, entity_type_id: str, entity_ids: list[int | str]
    ) -> dict[str, ContentEntity]:
        stored = self._entities.get(entity_type_id, {})
        return {str(i): stored[str(i)] for i in entity_ids if str(i) in stored}

    async def query_ids(self, query: EntityQuery) -> list[int | str]:
        """Keyset query: filters, id > after_id, ascending, limited."""
        after = id_sort_key(query.after_id) if query.after_id is not None else None
        matches = [
            entity
            for entity in self._entities.get(query.entity_type_id, {}).values()
            if (query.bundle is None or entity.bundle == query.bundle)
            and (not query.published_only or entity.published)
            and (after is None or id_sort_key(entity.id) > after)
        ]
        matches.sort(key=lambda entity: id_sort_key(entity.id))
        return [entity.id for entity in matches[: max(0, query.limit)]]

    # ------------------------------------------------------------------
    # AliasRepository
    # ------------------------------------------------------------------

    async def get_path_by_alias(self, alias: str, langcode: str) -> str:
        for code in (langcode, LANGUAGE_NEUTRAL):
            path = self._alias_to_path.get((code, alias))
            if path is not None:
                return path
        return alias

    async def get_alias_by_path(self, path: str, langcode: str) -> str:
        for code in (langcode, LANGUAGE_NEUTRAL):
            alias = self._path_to_alias.get((code, path))
            if alias is not None:
                return alias
        return path

    # ------------------------------------------------------------------
    # RouteTable
    # ------------------------------------------------------------------

    async def match(self, internal_path: str) -> RouteMatch | None:
        path = normalize_path(internal_path)
        if path == "":
            return None

        if path in self._routes:
            return self._routes[path]

        for definition in self._definitions.values():
            if not definition.canonical_template:
                continue
            pattern = "^" + re.escape(definition.canonical_template).replace(
                re.escape("{id}"), "([^/]+)"
            ) + "$"
            found = re.match(pattern, path)
            if found:
                return RouteMatch(
                    route_name=definition.canonical_route_name,
                    parameters={definition.id: found.group(1)},
                )

        for view in self._views.values():
            if not view.enabled:
                continue
            for display in view.displays.values():
                if display.is_page and display.path and normalize_path(display.path) == path:
                    return RouteMatch(route_name=f"view.{view.id}.{display.id}")

        return None

    # ------------------------------------------------------------------
    # Views (see CatalogViewRegistry)
    # ------------------------------------------------------------------

    def get_view(self, view_id: str) -> ViewDefinition | None:
        return self._views.get(view_id)

    def list_views(self) -> list[ViewDefinition]:
        return list(self._views.values())

    # ------------------------------------------------------------------
    # RedirectLookup
    # ------------------------------------------------------------------

    async def find_matching_redirect(
        self, path: str, query: dict[str, str], langcode: str
    ) -> RedirectMatch | None:
        """Find a redirect whose source path matches and whose stored query
        parameters are all present in the request query."""
        for source, source_query, source_langcode, redirect in self._redirects:
            if source != path:
                continue
            if source_langcode not in (langcode, LANGUAGE_NEUTRAL):
                continue
            if any(query.get(k) != v for k, v in source_query.items()):
                continue
            return redirect
        return None


class CatalogViewRegistry:
    """ViewRegistry over a ContentCatalog.

    Separate from the catalog because EntityRepository already owns load().
    """

    def __init__(self, catalog: ContentCatalog) -> None:
        self._catalog = catalog

    async def load(self, view_id: str) -> ViewDefinition | None:
        return self._catalog.get_view(view_id)

    async def load_all(self) -> list[ViewDefinition]:
        return self._catalog.list_views()
