"""Unit tests for ContentPolicy and LangcodeSelector."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.services.content_policy import ContentPolicy
from src.application.services.langcode_selector import LangcodeSelector
from src.domain.entities import ContentEntity, ViewDefinition
from src.domain.enums import LangcodeFallback
from tests.conftest import make_config


@pytest.fixture
def mock_access() -> AsyncMock:
    access = AsyncMock()
    access.can_view_entity.return_value = True
    access.can_view_display.return_value = False
    return access


@pytest.mark.unit
class TestHeadlessEligibility:
    """Test bundle and view headless checks."""

    def test_allow_all_bundles(self, mock_access):
        policy = ContentPolicy(make_config(enable_all=True), mock_access)

        assert policy.is_headless("node", "anything") is True

    def test_bundle_allow_list(self, mock_access):
        policy = ContentPolicy(
            make_config(enable_all=False, headless_bundles=("node:page",)), mock_access
        )

        assert policy.is_headless("node", "page") is True
        assert policy.is_headless("node", "article") is False

    def test_empty_allow_list_allows_nothing(self, mock_access):
        policy = ContentPolicy(make_config(enable_all=False), mock_access)

        assert policy.is_headless("node", "page") is False

    def test_allow_all_views(self, mock_access):
        policy = ContentPolicy(make_config(enable_all_views=True), mock_access)

        assert policy.is_view_headless("blog", "page_1") is True

    def test_view_allow_list(self, mock_access):
        policy = ContentPolicy(
            make_config(enable_all_views=False, headless_views=("blog:page_1",)),
            mock_access,
        )

        assert policy.is_view_headless("blog", "page_1") is True
        assert policy.is_view_headless("blog", "page_2") is False


@pytest.mark.unit
class TestAccessDelegation:
    """Test access checks are delegated unchanged."""

    async def test_entity_access(self, mock_access):
        entity = ContentEntity(entity_type_id="node", bundle="page", id=1, uuid="u")
        policy = ContentPolicy(make_config(), mock_access)

        assert await policy.can_view_entity(entity) is True
        mock_access.can_view_entity.assert_awaited_once_with(entity)

    async def test_display_access(self, mock_access):
        view = ViewDefinition(id="blog", label="Blog", displays={})
        policy = ContentPolicy(make_config(), mock_access)

        assert await policy.can_view_display(view, "page_1") is False
        mock_access.can_view_display.assert_awaited_once_with(view, "page_1")


@pytest.fixture
def mock_languages() -> MagicMock:
    languages = MagicMock()
    languages.default_langcode.return_value = "en"
    languages.current_content_langcode.return_value = "fr"
    return languages


@pytest.mark.unit
class TestLangcodeSelector:
    """Test effective langcode selection."""

    def test_explicit_langcode_wins(self, mock_languages):
        selector = LangcodeSelector(
            make_config(langcode_fallback=LangcodeFallback.CURRENT), mock_languages
        )

        assert selector.effective("de") == "de"

    def test_site_default_fallback(self, mock_languages):
        selector = LangcodeSelector(
            make_config(langcode_fallback=LangcodeFallback.SITE_DEFAULT), mock_languages
        )

        assert selector.effective(None) == "en"
        mock_languages.current_content_langcode.assert_not_called()

    def test_current_fallback(self, mock_languages):
        selector = LangcodeSelector(
            make_config(langcode_fallback=LangcodeFallback.CURRENT), mock_languages
        )

        assert selector.effective(None) == "fr"

    def test_empty_langcode_uses_fallback(self, mock_languages):
        selector = LangcodeSelector(make_config(), mock_languages)

        assert selector.effective("") == "en"
