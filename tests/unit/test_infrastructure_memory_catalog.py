"""Unit tests for the in-memory ContentCatalog.

Tests cover:
- Keyset entity queries (filters, ordering, after_id, limit)
- Per-language and language-neutral aliases
- Route matching (explicit, canonical templates, view page displays)
- Redirect matching on path, stored query and langcode
"""

import pytest

from src.domain.entities import ContentEntity, RedirectMatch, RouteMatch
from src.domain.value_objects import EntityQuery
from src.infrastructure.content import CatalogViewRegistry, ContentCatalog
from src.infrastructure.content.memory_catalog import id_sort_key


@pytest.mark.unit
class TestQueryIds:
    """Test ContentCatalog.query_ids."""

    async def test_bundle_and_published_filters(self, catalog):
        ids = await catalog.query_ids(
            EntityQuery(entity_type_id="node", bundle="page", published_only=True, limit=10)
        )

        assert ids == [1]

    async def test_unpublished_included_without_filter(self, catalog):
        ids = await catalog.query_ids(
            EntityQuery(entity_type_id="node", bundle="page", limit=10)
        )

        assert ids == [1, 2]

    async def test_after_id_and_limit(self, catalog):
        ids = await catalog.query_ids(
            EntityQuery(entity_type_id="node", after_id="1", limit=1)
        )

        assert ids == [2]

    async def test_unknown_type_is_empty(self, catalog):
        assert await catalog.query_ids(EntityQuery(entity_type_id="nope", limit=5)) == []

    def test_numeric_ids_sort_before_strings(self):
        assert sorted([10, "b", 2, "a"], key=id_sort_key) == [2, 10, "a", "b"]

    async def test_load_multiple_skips_missing(self, catalog):
        loaded = await catalog.load_multiple("node", [1, 404, "3"])

        assert sorted(loaded) == ["1", "3"]

    def test_entity_of_unknown_type_is_rejected(self, catalog):
        with pytest.raises(KeyError):
            catalog.add_entity(
                ContentEntity(entity_type_id="media", bundle="image", id=1, uuid="m1")
            )


@pytest.mark.unit
class TestAliases:
    """Test alias translation in both directions."""

    async def test_language_specific_alias(self, catalog):
        assert await catalog.get_path_by_alias("/nouvelles/premier", "fr") == "/node/3"
        assert await catalog.get_alias_by_path("/node/3", "fr") == "/nouvelles/premier"
        assert await catalog.get_alias_by_path("/node/3", "en") == "/news/first"

    async def test_neutral_alias_applies_to_every_language(self, catalog):
        assert await catalog.get_path_by_alias("/about-us", "fr") == "/node/1"
        assert await catalog.get_alias_by_path("/node/1", "de") == "/about-us"

    async def test_unknown_values_pass_through(self, catalog):
        assert await catalog.get_path_by_alias("/nowhere", "en") == "/nowhere"
        assert await catalog.get_alias_by_path("/node/99", "en") == "/node/99"

    async def test_aliases_are_normalized_when_added(self):
        catalog = ContentCatalog()
        catalog.add_alias("node/9/", "//landing//")

        assert await catalog.get_path_by_alias("/landing", "en") == "/node/9"


@pytest.mark.unit
class TestMatch:
    """Test route matching."""

    async def test_explicit_route(self, catalog):
        assert await catalog.match("/contact") == RouteMatch(route_name="contact.site_page")

    async def test_canonical_template(self, catalog):
        match = await catalog.match("/taxonomy/term/5")

        assert match == RouteMatch(
            route_name="entity.taxonomy_term.canonical",
            parameters={"taxonomy_term": "5"},
        )

    async def test_view_page_display(self, catalog):
        assert await catalog.match("/blog") == RouteMatch(route_name="view.blog.page_1")

    async def test_disabled_view_does_not_route(self, catalog):
        assert await catalog.match("/archive") is None

    @pytest.mark.parametrize("path", ["", "/node/1/edit", "/unknown"])
    async def test_no_match(self, catalog, path):
        assert await catalog.match(path) is None


@pytest.mark.unit
class TestRedirects:
    """Test redirect matching."""

    async def test_path_match(self, catalog):
        assert await catalog.find_matching_redirect("/old-path", {}, "en") == RedirectMatch(
            to="/about-us", status_code=301
        )

    async def test_stored_query_must_be_present(self, catalog):
        assert await catalog.find_matching_redirect("/promo", {}, "en") is None
        assert await catalog.find_matching_redirect("/promo", {"utm": "2"}, "en") is None
        match = await catalog.find_matching_redirect(
            "/promo", {"utm": "1", "ref": "x"}, "en"
        )
        assert match is not None
        assert match.status_code == "302"

    async def test_language_specific_redirect(self):
        catalog = ContentCatalog()
        catalog.add_redirect("/alt", "/fr-only", 302, langcode="fr")

        assert await catalog.find_matching_redirect("/alt", {}, "en") is None
        assert await catalog.find_matching_redirect("/alt", {}, "fr") is not None


@pytest.mark.unit
class TestCatalogViewRegistry:
    """Test the catalog-backed view registry."""

    async def test_load_and_load_all(self, catalog):
        registry = CatalogViewRegistry(catalog)

        blog = await registry.load("blog")
        assert blog is not None
        assert blog.get_display("page_1") is not None
        assert await registry.load("missing") is None
        assert sorted(view.id for view in await registry.load_all()) == [
            "archive",
            "blog",
            "members",
            "search",
        ]
