"""AccessChecker protocol for "view" access decisions."""

from typing import Protocol

from src.domain.entities import ContentEntity, ViewDefinition


class AccessChecker(Protocol):
    """View access protocol (port).

    Decisions are made for the current execution identity (see
    AccountSwitcher).
    """

    async def can_view_entity(self, entity: ContentEntity) -> bool:
        """Whether the current identity may view this entity."""
        ...

    async def can_view_display(self, view: ViewDefinition, display_id: str) -> bool:
        """Whether the current identity may view this view display."""
        ...
