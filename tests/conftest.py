"""Pytest configuration and shared fixtures.

Provides:
1. Marker registration (unit, api)
2. FrontendConfig builder with test overrides
3. A seeded in-memory content catalog used by unit and API tests
"""

import asyncio
from dataclasses import replace
from typing import Any

import pytest

from src.domain.entities import (
    ContentEntity,
    EntityTypeDefinition,
    RouteMatch,
    ViewDefinition,
    ViewDisplay,
)
from src.domain.value_objects import FrontendConfig
from src.infrastructure.content import ContentCatalog

# Sample content UUIDs
ABOUT_UUID = "6c2d0b34-0f7a-4f0b-9d56-3a1c2a7f0001"
DRAFT_UUID = "6c2d0b34-0f7a-4f0b-9d56-3a1c2a7f0002"
NEWS_UUID = "6c2d0b34-0f7a-4f0b-9d56-3a1c2a7f0003"
TAG_UUID = "6c2d0b34-0f7a-4f0b-9d56-3a1c2a7f0005"


def make_config(**overrides: Any) -> FrontendConfig:
    """Helper to create a FrontendConfig for testing.

    Defaults: allow-all bundles and views, site default language,
    origin https://cms.example.com, routes feed enabled.

    Usage:
        config = make_config(enable_all=False, headless_bundles=("node:page",))
    """
    base = FrontendConfig(
        origin_base_url="https://cms.example.com",
        routes_enabled=True,
    )
    return replace(base, **overrides)


def build_sample_catalog() -> ContentCatalog:
    """Catalog with pages, an article, a tag, views, routes and redirects.

    Contents:
        node 1  page     published    alias /about-us
        node 2  page     unpublished  alias /draft
        node 3  article  published    alias /news/first (en), /nouvelles/premier (fr)
        term 5  tags     published    alias /tags/python
        view blog:page_1 at /blog (plus a block display)
        view members:page_1 at /members (restricted)
        view archive:page_1 at /archive (view disabled)
        view search:page_1 at /search/% (placeholder)
        route /contact -> contact.site_page
        redirect /old-path -> /about-us (301)
        redirect /promo?utm=1 -> https://shop.example.com/sale (302)
    """
    catalog = ContentCatalog()
    catalog.set_languages("en", ["en", "fr"])

    catalog.add_entity_type(
        EntityTypeDefinition(id="node", label="Content", canonical_template="/node/{id}"),
        bundles=["page", "article"],
    )
    catalog.add_entity_type(
        EntityTypeDefinition(
            id="taxonomy_term",
            label="Taxonomy term",
            canonical_template="/taxonomy/term/{id}",
            status_key=None,
        ),
        bundles=["tags"],
    )
    catalog.add_entity_type(
        EntityTypeDefinition(id="block_content", label="Block", canonical_template=None),
        bundles=["basic"],
    )

    catalog.add_entity(
        ContentEntity(
            entity_type_id="node", bundle="page", id=1, uuid=ABOUT_UUID, label="About us"
        )
    )
    catalog.add_entity(
        ContentEntity(
            entity_type_id="node",
            bundle="page",
            id=2,
            uuid=DRAFT_UUID,
            published=False,
            label="Draft",
        )
    )
    catalog.add_entity(
        ContentEntity(
            entity_type_id="node", bundle="article", id=3, uuid=NEWS_UUID, label="First"
        )
    )
    catalog.add_entity(
        ContentEntity(
            entity_type_id="taxonomy_term",
            bundle="tags",
            id=5,
            uuid=TAG_UUID,
            label="Python",
        )
    )

    catalog.add_alias("/node/1", "/about-us")
    catalog.add_alias("/node/2", "/draft")
    catalog.add_alias("/node/3", "/news/first", "en")
    catalog.add_alias("/node/3", "/nouvelles/premier", "fr")
    catalog.add_alias("/taxonomy/term/5", "/tags/python")

    catalog.add_view(
        ViewDefinition(
            id="blog",
            label="Blog",
            displays={
                "page_1": ViewDisplay(id="page_1", plugin="page", path="blog"),
                "block_1": ViewDisplay(id="block_1", plugin="block"),
            },
        )
    )
    catalog.add_view(
        ViewDefinition(
            id="members",
            label="Members",
            displays={
                "page_1": ViewDisplay(
                    id="page_1", plugin="page", path="members", restricted=True
                ),
            },
        )
    )
    catalog.add_view(
        ViewDefinition(
            id="archive",
            label="Archive",
            enabled=False,
            displays={"page_1": ViewDisplay(id="page_1", plugin="page", path="archive")},
        )
    )
    catalog.add_view(
        ViewDefinition(
            id="search",
            label="Search",
            displays={"page_1": ViewDisplay(id="page_1", plugin="page", path="search/%")},
        )
    )

    catalog.add_route("/contact", RouteMatch(route_name="contact.site_page"))

    catalog.add_redirect("/old-path", "/about-us", 301)
    catalog.add_redirect(
        "/promo", "https://shop.example.com/sale", "302", query={"utm": "1"}
    )
    return catalog


@pytest.fixture
def catalog() -> ContentCatalog:
    """Freshly seeded sample catalog."""
    return build_sample_catalog()


@pytest.fixture
def config() -> FrontendConfig:
    """Default test configuration."""
    return make_config()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with faked collaborators")
    config.addinivalue_line("markers", "api: HTTP tests through TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if asyncio.iscoroutinefunction(item.function):
            item.add_marker(pytest.mark.asyncio)
