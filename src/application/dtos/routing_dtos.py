"""Routes feed result DTOs."""

from dataclasses import dataclass

from src.domain.enums import ResolutionKind


@dataclass(frozen=True, kw_only=True)
class RouteItem:
    """One enumerable route.

    Exactly one of jsonapi_url/data_url is set, matching kind.

    Attributes:
        path: Canonical path (alias when one exists).
        kind: ResolutionKind.VIEW or ResolutionKind.ENTITY.
        jsonapi_url: Entity resource URL.
        data_url: View data URL.
    """

    path: str
    kind: ResolutionKind
    jsonapi_url: str | None = None
    data_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class RoutesPage:
    """One page of the routes feed.

    Attributes:
        items: Routes on this page, at most limit of them.
        next_cursor: Cursor for the next page, None when enumeration is done.
        langcode: Effective language used for aliases.
        limit: Clamped page size.
    """

    items: list[RouteItem]
    next_cursor: str | None
    langcode: str
    limit: int
