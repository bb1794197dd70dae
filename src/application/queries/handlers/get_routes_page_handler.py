"""GetRoutesPage query handler (routes feed paginator).

Enumerates every headless route as one cursor-paginated sequence made of
two segments, in fixed order:

    1. views: sorted page-display routes, sliced by index
    2. entities: sorted bundle keys, each walked with keyset queries
       (id > last_id, ascending, bounded by remaining page capacity)

All access checks run as the anonymous user. A bundle query that returns
as many ids as requested may have more rows behind it, even if every id
was filtered out by access, so the page ends there with an entities cursor
at that id. Each request issues at most one full bundle query; callers
follow cursors across pages that may come back empty.

Architecture:
- Application layer handler; the access guard is checked separately by
  RoutesFeedAccess before this handler runs
- Returns RoutesPage directly (an empty page is a valid outcome)
- View listing failures are logged and yield no view routes; other
  collaborator errors propagate
"""

from dataclasses import dataclass

from src.application.dtos import RouteItem, RoutesPage
from src.application.queries.routing_queries import GetRoutesPage
from src.application.services.anonymous_context import run_as_anonymous
from src.application.services.api_urls import entity_resource_url, view_data_url
from src.application.services.content_policy import ContentPolicy
from src.application.services.cursor_codec import decode_cursor, encode_cursor
from src.application.services.langcode_selector import LangcodeSelector
from src.core.constants import ROUTES_FEED_MAX_LIMIT, ROUTES_FEED_MIN_LIMIT
from src.domain.entities import ViewDefinition
from src.domain.enums import ResolutionKind
from src.domain.path_normalizer import normalize_path
from src.domain.protocols import (
    AccountSwitcher,
    AliasRepository,
    EntityRepository,
    LoggerProtocol,
    ViewRegistry,
)
from src.domain.value_objects import (
    BundleKey,
    EntitiesCursor,
    EntityQuery,
    FrontendConfig,
    ViewRouteKey,
    ViewsCursor,
)


@dataclass(frozen=True, kw_only=True)
class _BundleSlice:
    """Routes from one bundle query.

    Attributes:
        items: Visible routes.
        next_last_id: Last fetched id when the query came back full,
            None when the bundle is exhausted.
    """

    items: list[RouteItem]
    next_last_id: str | None


def clamp_limit(limit: int) -> int:
    """Clamp a requested page size to [1, 200]."""
    return max(ROUTES_FEED_MIN_LIMIT, min(ROUTES_FEED_MAX_LIMIT, limit))


class GetRoutesPageHandler:
    """Handler for GetRoutesPage query.

    Dependencies (injected via constructor):
        - FrontendConfig: Allow-lists and base path
        - EntityRepository: Definitions, bundles, keyset queries, loading
        - AliasRepository: Canonical aliases of entity routes
        - ContentPolicy: Per-entity access checks
        - LangcodeSelector: Effective langcode
        - AccountSwitcher: Run-as-anonymous scope
        - LoggerProtocol: Degraded view listing, page summaries
        - ViewRegistry | None: Views support, None when not installed
    """

    def __init__(
        self,
        config: FrontendConfig,
        entities: EntityRepository,
        aliases: AliasRepository,
        policy: ContentPolicy,
        langcodes: LangcodeSelector,
        account_switcher: AccountSwitcher,
        logger: LoggerProtocol,
        views: ViewRegistry | None = None,
    ) -> None:
        self._config = config
        self._entities = entities
        self._aliases = aliases
        self._policy = policy
        self._langcodes = langcodes
        self._account_switcher = account_switcher
        self._logger = logger
        self._views = views

    async def handle(self, query: GetRoutesPage) -> RoutesPage:
        """Handle GetRoutesPage query.

        Args:
            query: GetRoutesPage query.

        Returns:
            RoutesPage with up to limit items and the cursor to continue.
        """
        limit = clamp_limit(query.limit)
        langcode = self._langcodes.effective(query.langcode)

        view_items = await self._view_route_items()
        bundle_keys = await self._bundle_keys()

        state = decode_cursor(query.cursor) or ViewsCursor(index=0)

        items: list[RouteItem] = []
        with run_as_anonymous(self._account_switcher):
            if isinstance(state, ViewsCursor):
                end = state.index + limit
                items.extend(view_items[state.index : end])
                if end < len(view_items):
                    return self._page(items, ViewsCursor(index=end), langcode, limit)
                state = EntitiesCursor(bundle_index=0, last_id=None)

            bundle_index = state.bundle_index
            last_id = state.last_id

            while len(items) < limit and bundle_index < len(bundle_keys):
                key = BundleKey.parse(bundle_keys[bundle_index])
                if key is None:
                    bundle_index += 1
                    last_id = None
                    continue

                bundle_slice = await self._bundle_route_items(
                    key, langcode, last_id, limit - len(items)
                )
                items.extend(bundle_slice.items)

                # A full query ends the page, even if access filtering emptied it.
                if bundle_slice.next_last_id is not None:
                    return self._page(
                        items,
                        EntitiesCursor(
                            bundle_index=bundle_index,
                            last_id=bundle_slice.next_last_id,
                        ),
                        langcode,
                        limit,
                    )

                bundle_index += 1
                last_id = None

        next_state = None
        if len(items) >= limit and bundle_index < len(bundle_keys):
            next_state = EntitiesCursor(bundle_index=bundle_index, last_id=last_id)
        return self._page(items, next_state, langcode, limit)

    def _page(
        self,
        items: list[RouteItem],
        next_state: ViewsCursor | EntitiesCursor | None,
        langcode: str,
        limit: int,
    ) -> RoutesPage:
        self._logger.debug(
            "Routes page served",
            count=len(items),
            has_next=next_state is not None,
            langcode=langcode,
        )
        return RoutesPage(
            items=items,
            next_cursor=encode_cursor(next_state) if next_state is not None else None,
            langcode=langcode,
            limit=limit,
        )

    async def _view_route_items(self) -> list[RouteItem]:
        if self._views is None:
            return []

        try:
            views = await self._load_feed_views(self._views)
        except Exception as e:
            self._logger.warning(
                "Could not build view routes",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return []

        allowed = set(self._config.headless_views)
        items: list[RouteItem] = []
        for view in views:
            if not view.enabled:
                continue
            for display_id, display in view.displays.items():
                if not display.is_page:
                    continue
                key = ViewRouteKey(view_id=view.id, display_id=display_id)
                if not self._config.enable_all_views and str(key) not in allowed:
                    continue

                raw = (display.path or "").strip()
                if raw == "":
                    continue
                path = normalize_path("/" + raw.lstrip("/"))
                # Argument placeholders cannot be enumerated.
                if path == "" or "%" in path or "{" in path:
                    continue

                items.append(
                    RouteItem(
                        path=path,
                        kind=ResolutionKind.VIEW,
                        data_url=view_data_url(self._config.jsonapi_base_path, key),
                    )
                )

        items.sort(key=lambda item: (item.path, item.data_url or ""))
        return items

    async def _load_feed_views(self, registry: ViewRegistry) -> list[ViewDefinition]:
        if self._config.enable_all_views:
            return await registry.load_all()

        view_ids: list[str] = []
        for raw in self._config.headless_views:
            key = ViewRouteKey.parse(raw)
            if key is not None and key.view_id not in view_ids:
                view_ids.append(key.view_id)

        views: list[ViewDefinition] = []
        for view_id in view_ids:
            view = await registry.load(view_id)
            if view is not None:
                views.append(view)
        return views

    async def _bundle_keys(self) -> list[str]:
        if not self._config.enable_all:
            return sorted(self._config.headless_bundles)

        keys: list[str] = []
        definitions = await self._entities.list_definitions()
        for definition in sorted(definitions, key=lambda d: d.id):
            if not definition.is_content or not definition.has_canonical_route:
                continue
            bundles = await self._entities.get_bundles(definition.id)
            if not bundles:
                keys.append(f"{definition.id}:{definition.id}")
                continue
            keys.extend(f"{definition.id}:{bundle}" for bundle in bundles)
        return sorted(keys)

    async def _bundle_route_items(
        self, key: BundleKey, langcode: str, last_id: str | None, limit: int
    ) -> _BundleSlice:
        exhausted = _BundleSlice(items=[], next_last_id=None)

        definition = await self._entities.get_definition(key.entity_type_id)
        if (
            definition is None
            or not definition.is_content
            or not definition.has_canonical_route
            or not definition.id_key
        ):
            return exhausted

        ids = await self._entities.query_ids(
            EntityQuery(
                entity_type_id=key.entity_type_id,
                bundle=key.bundle if definition.bundle_key else None,
                published_only=bool(definition.status_key),
                after_id=last_id,
                limit=limit,
            )
        )
        if not ids:
            return exhausted

        loaded = await self._entities.load_multiple(key.entity_type_id, ids)
        items: list[RouteItem] = []
        last_seen: str | None = None
        for entity_id in ids:
            last_seen = str(entity_id)
            entity = loaded.get(last_seen)
            if entity is None:
                continue
            # Hidden content is treated as absent.
            if not await self._policy.can_view_entity(entity):
                continue

            internal = definition.canonical_path(entity.id)
            if internal is None:
                continue
            alias = await self._aliases.get_alias_by_path(internal, langcode)
            path = normalize_path(alias or internal)
            if path == "":
                continue

            items.append(
                RouteItem(
                    path=path,
                    kind=ResolutionKind.ENTITY,
                    jsonapi_url=entity_resource_url(
                        self._config.jsonapi_base_path, entity
                    ),
                )
            )

        if len(ids) < limit:
            return _BundleSlice(items=items, next_last_id=None)
        return _BundleSlice(items=items, next_last_id=last_seen)
