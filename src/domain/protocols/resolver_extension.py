"""ResolverExtension protocol.

Extensions classify routes the core does not know about (for example a
webform page) and usually answer with kind=route so the frontend proxies
the path to the CMS.
"""

from typing import Protocol

from src.domain.entities import RouteMatch
from src.domain.value_objects import ResolverResult


class ResolverExtension(Protocol):
    """Route classification extension point."""

    async def classify(
        self, match: RouteMatch, canonical: str, langcode: str
    ) -> ResolverResult | None:
        """Classify a matched route.

        Args:
            match: Route table match the core could not classify.
            canonical: Normalized requested path.
            langcode: Effective language.

        Returns:
            A resolved result, or None to let the next extension try.
        """
        ...
