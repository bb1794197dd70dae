"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.
Every field has a default so the service boots with an empty environment.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Resolver/feed code never reads Settings directly: it receives the
  immutable FrontendConfig snapshot built by frontend_config()

Usage:
    from src.core.config import settings

    config = settings.frontend_config()
    if config.enable_all:
        ...
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.core.enums import Environment
from src.domain.enums import LangcodeFallback
from src.domain.value_objects import FrontendConfig


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose errors)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Wayfinder",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API surface
    jsonapi_base_path: str = Field(
        default="/jsonapi",
        description="Prefix of generated JSON:API URLs and of the resolver/routes endpoints",
    )
    origin_base_url: str | None = Field(
        default=None,
        description="Legacy CMS origin used for external_url of non-headless content. "
        "Falls back to the live request origin when unset.",
    )

    # Resolver
    resolver_cache_max_age: int = Field(
        default=0,
        description="Public max-age (seconds) for anonymous resolver responses; 0 disables caching",
    )
    resolver_langcode_fallback: LangcodeFallback = Field(
        default=LangcodeFallback.SITE_DEFAULT,
        description="Language used when no langcode is requested (site_default or current)",
    )

    # Headless eligibility
    enable_all: bool = Field(
        default=True,
        description="Treat every content bundle as headless",
    )
    headless_bundles: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Allow-listed bundle keys (comma-separated entity_type:bundle)",
    )
    enable_all_views: bool = Field(
        default=True,
        description="Treat every view page display as headless",
    )
    headless_views: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Allow-listed view keys (comma-separated view_id:display_id)",
    )

    # Routes feed
    routes_enabled: bool = Field(
        default=False,
        description="Expose the protected routes feed",
    )

    # Backends
    secrets_backend: str = Field(
        default="env",
        description="Secrets backend (env)",
    )
    content_snapshot_path: str | None = Field(
        default=None,
        description="JSON snapshot seeding the in-memory content catalog",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("resolver_cache_max_age")
    @classmethod
    def clamp_cache_max_age(cls, v: int) -> int:
        """
        Clamp negative max-age values to zero.

        Args:
            v: Configured max-age in seconds.

        Returns:
            int: Non-negative max-age.
        """
        return max(0, v)

    @field_validator("origin_base_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """
        Remove trailing slashes from the origin URL; blank means unset.

        Args:
            v: URL string or None.

        Returns:
            str | None: URL without trailing slash, or None.
        """
        if v is None or v.strip() == "":
            return None
        return v.strip().rstrip("/")

    @field_validator("jsonapi_base_path")
    @classmethod
    def validate_base_path(cls, v: str) -> str:
        """
        Force a single leading slash and no trailing slash.

        Args:
            v: Base path string.

        Returns:
            str: Normalized base path.
        """
        return "/" + v.strip().strip("/")

    @field_validator("headless_bundles", "headless_views", mode="before")
    @classmethod
    def parse_key_list(cls, v: str | list[str]) -> list[str]:
        """
        Parse comma-separated allow-list keys.

        Args:
            v: Comma-separated string or an already-split list.

        Returns:
            list[str]: Non-empty, stripped keys.
        """
        items = v.split(",") if isinstance(v, str) else v
        return [item.strip() for item in items if item.strip()]

    def frontend_config(self) -> FrontendConfig:
        """
        Build the immutable configuration snapshot used by the resolver and feed.

        Returns:
            FrontendConfig: Snapshot of headless/resolver settings.
        """
        return FrontendConfig(
            enable_all=self.enable_all,
            headless_bundles=tuple(self.headless_bundles),
            enable_all_views=self.enable_all_views,
            headless_views=tuple(self.headless_views),
            langcode_fallback=self.resolver_langcode_fallback,
            origin_base_url=self.origin_base_url,
            jsonapi_base_path=self.jsonapi_base_path,
            resolver_cache_max_age=self.resolver_cache_max_age,
            routes_enabled=self.routes_enabled,
        )

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
