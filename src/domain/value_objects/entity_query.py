"""Keyset entity query."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityQuery:
    """Bounded, ascending-by-id entity id query (value object).

    Attributes:
        entity_type_id: Entity type to query.
        bundle: Bundle filter, None to match every bundle.
        published_only: Only published entities.
        after_id: Only ids strictly greater than this one.
        limit: Maximum number of ids returned.
    """

    entity_type_id: str
    limit: int
    bundle: str | None = None
    published_only: bool = False
    after_id: str | None = None
