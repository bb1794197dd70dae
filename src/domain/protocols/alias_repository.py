"""AliasRepository protocol for path alias translation."""

from typing import Protocol


class AliasRepository(Protocol):
    """Path alias protocol (port).

    Both lookups return their input unchanged when no alias applies.
    """

    async def get_path_by_alias(self, alias: str, langcode: str) -> str:
        """Translate a human-facing alias to an internal path.

        Args:
            alias: Normalized alias, e.g. "/about-us".
            langcode: Language to look the alias up in.

        Returns:
            Internal path (e.g. "/node/1"), or alias when unknown.
        """
        ...

    async def get_alias_by_path(self, path: str, langcode: str) -> str:
        """Translate an internal path to its preferred alias.

        Args:
            path: Internal path, e.g. "/node/1".
            langcode: Language of the alias.

        Returns:
            Alias, or path when it has none.
        """
        ...
