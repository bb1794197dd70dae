"""RouteTable protocol for internal path routing."""

from typing import Protocol

from src.domain.entities import RouteMatch


class RouteTable(Protocol):
    """Route table protocol (port)."""

    async def match(self, internal_path: str) -> RouteMatch | None:
        """Match an internal path against registered routes.

        Args:
            internal_path: Path after alias translation.

        Returns:
            RouteMatch if the path is routable, None otherwise.
        """
        ...
