"""Unit tests for GetRoutesPageHandler.

Tests cover:
- Full enumeration order (views, then entity bundles)
- Cursor walking until exhaustion, determinism, bad cursors
- Pages that come back empty because every id was access-filtered
- Allow-list modes and malformed bundle keys
- Degraded view listing and the run-as-anonymous guard
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.dtos import RoutesPage
from src.application.queries import GetRoutesPage
from src.application.queries.handlers.get_routes_page_handler import (
    GetRoutesPageHandler,
    clamp_limit,
)
from src.application.services.content_policy import ContentPolicy
from src.application.services.cursor_codec import decode_cursor
from src.application.services.langcode_selector import LangcodeSelector
from src.domain.entities import (
    ContentEntity,
    EntityTypeDefinition,
    Identity,
    ViewDefinition,
    ViewDisplay,
)
from src.domain.enums import ResolutionKind
from src.domain.value_objects import EntitiesCursor, FrontendConfig
from src.infrastructure.content import (
    CatalogAccessChecker,
    CatalogViewRegistry,
    ContentCatalog,
    ContextVarLanguageManager,
)
from src.infrastructure.security import ContextVarAccountSwitcher
from tests.conftest import ABOUT_UUID, NEWS_UUID, TAG_UUID, make_config

ALL_PATHS = ["/blog", "/members", "/news/first", "/about-us", "/tags/python"]


def build_handler(
    catalog: ContentCatalog,
    config: FrontendConfig | None = None,
    *,
    access=None,
    switcher: ContextVarAccountSwitcher | None = None,
    logger: MagicMock | None = None,
    views=None,
    with_views: bool = True,
) -> GetRoutesPageHandler:
    """Build a feed handler over the catalog; keyword args swap collaborators."""
    config = config or make_config()
    switcher = switcher or ContextVarAccountSwitcher()
    if views is None and with_views:
        views = CatalogViewRegistry(catalog)
    return GetRoutesPageHandler(
        config=config,
        entities=catalog,
        aliases=catalog,
        policy=ContentPolicy(config, access or CatalogAccessChecker(switcher)),
        langcodes=LangcodeSelector(
            config,
            ContextVarLanguageManager(catalog.default_langcode, catalog.langcodes),
        ),
        account_switcher=switcher,
        logger=logger or MagicMock(),
        views=views,
    )


async def walk(handler: GetRoutesPageHandler, limit: int, **kwargs) -> list[RoutesPage]:
    """Follow next cursors from the first page until exhaustion."""
    pages: list[RoutesPage] = []
    cursor = None
    while True:
        page = await handler.handle(GetRoutesPage(limit=limit, cursor=cursor, **kwargs))
        pages.append(page)
        if page.next_cursor is None:
            return pages
        assert len(pages) < 50, "feed did not terminate"
        cursor = page.next_cursor


def page_paths(pages: list[RoutesPage]) -> list[str]:
    return [item.path for page in pages for item in page.items]


@pytest.mark.unit
class TestFirstPage:
    """Test a single page large enough for everything."""

    async def test_views_then_entities(self, catalog):
        handler = build_handler(catalog)

        page = await handler.handle(GetRoutesPage())

        assert page.next_cursor is None
        assert page.limit == 50
        assert page.langcode == "en"
        assert [item.path for item in page.items] == ALL_PATHS

    async def test_item_shapes(self, catalog):
        handler = build_handler(catalog)

        page = await handler.handle(GetRoutesPage())
        by_path = {item.path: item for item in page.items}

        blog = by_path["/blog"]
        assert blog.kind == ResolutionKind.VIEW
        assert blog.data_url == "/jsonapi/views/blog/page_1"
        assert blog.jsonapi_url is None

        about = by_path["/about-us"]
        assert about.kind == ResolutionKind.ENTITY
        assert about.jsonapi_url == f"/jsonapi/node/page/{ABOUT_UUID}"
        assert about.data_url is None

        assert by_path["/news/first"].jsonapi_url == f"/jsonapi/node/article/{NEWS_UUID}"
        assert (
            by_path["/tags/python"].jsonapi_url
            == f"/jsonapi/taxonomy_term/tags/{TAG_UUID}"
        )

    async def test_excludes_hidden_and_unroutable(self, catalog):
        handler = build_handler(catalog)

        page = await handler.handle(GetRoutesPage())
        paths = [item.path for item in page.items]

        assert "/draft" not in paths
        assert "/archive" not in paths
        assert not any("%" in path for path in paths)

    async def test_langcode_selects_aliases(self, catalog):
        handler = build_handler(catalog)

        page = await handler.handle(GetRoutesPage(langcode="fr"))

        assert page.langcode == "fr"
        assert "/nouvelles/premier" in [item.path for item in page.items]
        assert "/news/first" not in [item.path for item in page.items]

    async def test_without_view_support(self, catalog):
        handler = build_handler(catalog, with_views=False)

        page = await handler.handle(GetRoutesPage())

        assert [item.path for item in page.items] == ALL_PATHS[2:]


@pytest.mark.unit
class TestCursorWalk:
    """Test cursor pagination across segments."""

    @pytest.mark.parametrize("limit", [1, 2, 3, 4, 5, 7])
    async def test_union_of_pages_is_full_feed(self, catalog, limit):
        handler = build_handler(catalog)

        pages = await walk(handler, limit)

        assert page_paths(pages) == ALL_PATHS
        assert all(len(page.items) <= limit for page in pages)

    async def test_limit_two_page_boundaries(self, catalog):
        handler = build_handler(catalog)

        pages = await walk(handler, 2)

        assert [[item.path for item in page.items] for page in pages] == [
            ["/blog", "/members"],
            ["/news/first", "/about-us"],
            ["/tags/python"],
        ]
        assert decode_cursor(pages[0].next_cursor) == EntitiesCursor(
            bundle_index=0, last_id=None
        )

    async def test_one_view_two_entities_limit_one(self):
        catalog = ContentCatalog()
        catalog.add_entity_type(
            EntityTypeDefinition(id="node", canonical_template="/node/{id}"),
            bundles=["page"],
        )
        for entity_id in (1, 2):
            catalog.add_entity(
                ContentEntity(
                    entity_type_id="node", bundle="page", id=entity_id, uuid=f"u{entity_id}"
                )
            )
        catalog.add_view(
            ViewDefinition(
                id="blog",
                displays={"page_1": ViewDisplay(id="page_1", path="/blog")},
            )
        )
        handler = build_handler(catalog)

        pages = await walk(handler, 1)

        assert page_paths(pages) == ["/blog", "/node/1", "/node/2"]
        assert [page.items[0].kind for page in pages if page.items] == [
            ResolutionKind.VIEW,
            ResolutionKind.ENTITY,
            ResolutionKind.ENTITY,
        ]
        # A full bundle page cannot tell whether more rows follow.
        assert pages[-1].items == []

    async def test_same_cursor_same_page(self, catalog):
        handler = build_handler(catalog)
        first = await handler.handle(GetRoutesPage(limit=3))

        again = await handler.handle(GetRoutesPage(limit=3, cursor=first.next_cursor))
        once_more = await handler.handle(GetRoutesPage(limit=3, cursor=first.next_cursor))

        assert again == once_more

    @pytest.mark.parametrize("cursor", ["not-a-cursor", "!!!", "e30", "x" * 2000])
    async def test_bad_cursor_restarts_from_views(self, catalog, cursor):
        handler = build_handler(catalog)

        page = await handler.handle(GetRoutesPage(limit=1, cursor=cursor))

        assert [item.path for item in page.items] == ["/blog"]


def crowded_catalog(count: int) -> ContentCatalog:
    """One node:page bundle holding entities 1..count."""
    catalog = ContentCatalog()
    catalog.add_entity_type(
        EntityTypeDefinition(id="node", canonical_template="/node/{id}"),
        bundles=["page"],
    )
    for entity_id in range(1, count + 1):
        catalog.add_entity(
            ContentEntity(
                entity_type_id="node", bundle="page", id=entity_id, uuid=f"u{entity_id}"
            )
        )
    return catalog


def deny_all() -> AsyncMock:
    access = AsyncMock()
    access.can_view_entity.return_value = False
    return access


def count_queries(catalog: ContentCatalog) -> AsyncMock:
    """Replace query_ids with a spy that still runs the real query."""
    spy = AsyncMock(side_effect=catalog.query_ids)
    catalog.query_ids = spy
    return spy


@pytest.mark.unit
class TestAccessFiltering:
    """Test bundles whose ids are filtered out by access checks."""

    async def test_full_denied_query_ends_page_with_cursor(self):
        catalog = crowded_catalog(1000)
        queries = count_queries(catalog)
        handler = build_handler(catalog, access=deny_all(), with_views=False)

        page = await handler.handle(GetRoutesPage(limit=1))

        assert page.items == []
        assert decode_cursor(page.next_cursor) == EntitiesCursor(
            bundle_index=0, last_id="1"
        )
        assert queries.await_count == 1

    async def test_denied_bundle_walks_empty_pages_to_exhaustion(self):
        catalog = crowded_catalog(5)
        queries = count_queries(catalog)
        access = deny_all()
        handler = build_handler(catalog, access=access, with_views=False)

        pages = await walk(handler, 2)

        assert [page.items for page in pages] == [[], [], []]
        assert [decode_cursor(page.next_cursor) for page in pages[:-1]] == [
            EntitiesCursor(bundle_index=0, last_id="2"),
            EntitiesCursor(bundle_index=0, last_id="4"),
        ]
        assert pages[-1].next_cursor is None
        assert queries.await_count == 3
        assert access.can_view_entity.await_count == 5

    @pytest.mark.parametrize(
        ("count", "limit", "expected_pages"),
        [(120, 50, 3), (7, 3, 3), (6, 3, 3)],
    )
    async def test_one_bundle_query_per_request(self, count, limit, expected_pages):
        catalog = crowded_catalog(count)
        queries = count_queries(catalog)
        handler = build_handler(catalog, access=deny_all(), with_views=False)

        pages = await walk(handler, limit)

        assert len(pages) == expected_pages
        assert all(page.items == [] for page in pages)
        assert all(page.next_cursor is not None for page in pages[:-1])
        assert queries.await_count == len(pages)

    async def test_partially_denied_bundle_returns_short_pages(self):
        access = AsyncMock()
        access.can_view_entity.side_effect = lambda entity: entity.id % 2 == 1
        handler = build_handler(crowded_catalog(5), access=access, with_views=False)

        pages = await walk(handler, 2)

        assert [[item.path for item in page.items] for page in pages] == [
            ["/node/1"],
            ["/node/3"],
            ["/node/5"],
        ]


class TestAllowLists:
    """Test allow-list configuration."""

    async def test_view_allow_list_loads_listed_views(self, catalog):
        views = AsyncMock()
        views.load.side_effect = catalog.get_view
        config = make_config(
            enable_all_views=False,
            headless_views=("blog:page_1", "missing:page_1", "bad"),
            enable_all=False,
        )
        handler = build_handler(catalog, config, views=views)

        page = await handler.handle(GetRoutesPage())

        assert [item.path for item in page.items] == ["/blog"]
        assert [call.args[0] for call in views.load.await_args_list] == [
            "blog",
            "missing",
        ]
        views.load_all.assert_not_called()

    async def test_bundle_allow_list_skips_malformed_keys(self, catalog):
        config = make_config(
            enable_all=False,
            headless_bundles=("taxonomy_term:tags", "garbage", "node:page", "node:"),
            enable_all_views=False,
        )
        handler = build_handler(catalog, config)

        pages = await walk(handler, 1)

        assert page_paths(pages) == ["/about-us", "/tags/python"]

    async def test_unknown_entity_type_is_skipped(self, catalog):
        config = make_config(
            enable_all=False,
            headless_bundles=("block_content:basic", "gone:thing", "node:article"),
            enable_all_views=False,
        )
        handler = build_handler(catalog, config)

        page = await handler.handle(GetRoutesPage())

        assert [item.path for item in page.items] == ["/news/first"]


@pytest.mark.unit
class TestDegradedAndGuard:
    """Test view listing failures and identity scoping."""

    async def test_view_listing_failure_is_logged(self, catalog):
        views = AsyncMock()
        views.load_all.side_effect = RuntimeError("views offline")
        logger = MagicMock()
        handler = build_handler(catalog, views=views, logger=logger)

        page = await handler.handle(GetRoutesPage())

        assert [item.path for item in page.items] == ALL_PATHS[2:]
        logger.warning.assert_called_once()
        assert logger.warning.call_args.args[0] == "Could not build view routes"
        assert logger.warning.call_args.kwargs["error_type"] == "RuntimeError"

    async def test_access_runs_as_anonymous(self, catalog):
        switcher = ContextVarAccountSwitcher()
        seen: list[bool] = []

        def record(entity):
            seen.append(switcher.current_identity().is_anonymous)
            return True

        access = AsyncMock()
        access.can_view_entity.side_effect = record
        handler = build_handler(catalog, access=access, switcher=switcher)
        editor = Identity(subject="editor")

        switcher.switch_to(editor)
        try:
            await handler.handle(GetRoutesPage())
            assert switcher.current_identity() == editor
        finally:
            switcher.switch_back()

        assert seen
        assert all(seen)

    async def test_identity_restored_on_error(self, catalog):
        switcher = ContextVarAccountSwitcher()
        access = AsyncMock()
        access.can_view_entity.side_effect = RuntimeError("access backend down")
        handler = build_handler(catalog, access=access, switcher=switcher)
        editor = Identity(subject="editor")

        switcher.switch_to(editor)
        try:
            with pytest.raises(RuntimeError):
                await handler.handle(GetRoutesPage())
            assert switcher.current_identity() == editor
        finally:
            switcher.switch_back()


@pytest.mark.unit
class TestClampLimit:
    """Test clamp_limit."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(-5, 1), (0, 1), (1, 1), (50, 50), (200, 200), (201, 200), (10_000, 200)],
    )
    def test_clamps(self, raw, expected):
        assert clamp_limit(raw) == expected

    async def test_page_reports_clamped_limit(self, catalog):
        handler = build_handler(catalog)

        assert (await handler.handle(GetRoutesPage(limit=0))).limit == 1
        assert (await handler.handle(GetRoutesPage(limit=999))).limit == 200
