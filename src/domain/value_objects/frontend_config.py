"""Frontend configuration snapshot.

Immutable view of the settings the resolver, the routes feed and the
content policy depend on. Built once by the composition root from
Settings.frontend_config() and passed in explicitly, so tests can hand
in any configuration without touching process-wide state.

Usage:
    config = FrontendConfig(enable_all=False, headless_bundles=("node:page",))
"""

from dataclasses import dataclass

from src.domain.enums.langcode_fallback import LangcodeFallback


@dataclass(frozen=True, slots=True, kw_only=True)
class FrontendConfig:
    """Headless/resolver configuration (value object).

    Attributes:
        enable_all: Every bundle is headless.
        headless_bundles: Allow-listed "{type}:{bundle}" keys, used when
            enable_all is False.
        enable_all_views: Every view page display is headless.
        headless_views: Allow-listed "{view}:{display}" keys, used when
            enable_all_views is False.
        langcode_fallback: Language policy when none is requested.
        origin_base_url: CMS origin for external_url, without trailing slash.
        jsonapi_base_path: Prefix of generated API URLs.
        resolver_cache_max_age: Public max-age for anonymous resolver hits.
        routes_enabled: Whether the routes feed is exposed.
    """

    enable_all: bool = True
    headless_bundles: tuple[str, ...] = ()
    enable_all_views: bool = True
    headless_views: tuple[str, ...] = ()
    langcode_fallback: LangcodeFallback = LangcodeFallback.SITE_DEFAULT
    origin_base_url: str | None = None
    jsonapi_base_path: str = "/jsonapi"
    resolver_cache_max_age: int = 0
    routes_enabled: bool = False
