"""ViewRegistry protocol (optional collaborator).

Absent when the site has no views support; the composition root then
injects None and view routes resolve as not found.
"""

from typing import Protocol

from src.domain.entities import ViewDefinition


class ViewRegistry(Protocol):
    """View storage protocol (port)."""

    async def load(self, view_id: str) -> ViewDefinition | None:
        """Load one view, None if it does not exist."""
        ...

    async def load_all(self) -> list[ViewDefinition]:
        """Load every view, enabled or not."""
        ...
