"""RedirectLookup protocol (optional collaborator)."""

from typing import Protocol

from src.domain.entities import RedirectMatch


class RedirectLookup(Protocol):
    """Redirect table protocol (port).

    Lookups are best-effort: callers treat any exception as "no match".
    """

    async def find_matching_redirect(
        self, path: str, query: dict[str, str], langcode: str
    ) -> RedirectMatch | None:
        """Find a redirect for a path.

        Args:
            path: Normalized source path.
            query: Parsed query parameters of the request path.
            langcode: Effective language.

        Returns:
            Stored redirect record, or None.
        """
        ...
