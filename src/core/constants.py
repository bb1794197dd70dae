"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Limits: Input size guards
- Pagination: Routes feed page bounds
- HTTP: Media types and header names
"""

# =============================================================================
# Limits
# =============================================================================

MAX_PATH_LENGTH: int = 2048
"""Longest raw path the normalizer accepts; longer input normalizes to ''."""

MAX_CURSOR_LENGTH: int = 1024
"""Longest cursor token the codec will attempt to decode."""


# =============================================================================
# Pagination
# =============================================================================

ROUTES_FEED_DEFAULT_LIMIT: int = 50
"""Page size used when the client does not send page[limit]."""

ROUTES_FEED_MIN_LIMIT: int = 1
ROUTES_FEED_MAX_LIMIT: int = 200


# =============================================================================
# HTTP
# =============================================================================

JSONAPI_CONTENT_TYPE: str = "application/vnd.api+json; charset=utf-8"
"""Content type for every resolver and routes feed response."""

ROUTES_SECRET_HEADER: str = "X-Routes-Secret"
"""Request header carrying the routes feed shared secret."""

ROUTES_SECRET_PATH: str = "routes/secret"
"""Secrets-manager path of the routes feed shared secret."""

DEFAULT_REDIRECT_STATUS: int = 301
"""Status used when a redirect carries no usable 3xx status code."""
