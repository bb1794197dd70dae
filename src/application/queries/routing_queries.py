"""Routing queries for CQRS read operations.

Architecture:
- Queries are immutable (frozen dataclasses)
- NO business logic in queries (just data transfer)
- Handlers perform resolution and enumeration
"""

from dataclasses import dataclass

from src.core.constants import ROUTES_FEED_DEFAULT_LIMIT


@dataclass(frozen=True, kw_only=True)
class ResolvePath:
    """Query to resolve a frontend path to the resource serving it.

    Attributes:
        path: Raw path, may include a query string and fragment.
        langcode: Requested language, None or "" to apply the fallback policy.
        request_origin: Scheme and host of the live request, used for
            external_url when no origin base URL is configured.

    Example:
        >>> query = ResolvePath(path="/about-us?utm=1", langcode="en")
        >>> result = await handler.handle(query)
    """

    path: str
    langcode: str | None = None
    request_origin: str | None = None


@dataclass(frozen=True, kw_only=True)
class GetRoutesPage:
    """Query to fetch one page of the routes feed.

    Attributes:
        limit: Requested page size; clamped to [1, 200] by the handler.
        cursor: Opaque cursor from a previous page, None for the first page.
        langcode: Language of the emitted aliases, None for the fallback.
    """

    limit: int = ROUTES_FEED_DEFAULT_LIMIT
    cursor: str | None = None
    langcode: str | None = None
