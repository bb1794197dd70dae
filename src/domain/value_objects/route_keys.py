"""Bundle and view route key value objects.

Both keys are "{left}:{right}" strings in configuration. They are the unit
of headless eligibility; bundle keys are also the unit of feed
checkpointing.

Usage:
    from src.domain.value_objects import BundleKey

    key = BundleKey.parse("node:article")
    if key is not None:
        key.entity_type_id  # "node"
"""

from dataclasses import dataclass
from typing import Self


def _split_key(raw: object) -> tuple[str, str] | None:
    if not isinstance(raw, str) or ":" not in raw:
        return None
    left, _, right = raw.strip().partition(":")
    left, right = left.strip(), right.strip()
    if not left or not right:
        return None
    return left, right


@dataclass(frozen=True, slots=True, kw_only=True)
class BundleKey:
    """Entity type and bundle pair (value object).

    Attributes:
        entity_type_id: Entity type machine name (e.g. "node").
        bundle: Bundle machine name (e.g. "page").
    """

    entity_type_id: str
    bundle: str

    @classmethod
    def parse(cls, raw: object) -> Self | None:
        """Parse "{entity_type}:{bundle}"; None when malformed.

        Args:
            raw: Configured key.

        Returns:
            BundleKey if both halves are non-blank, None otherwise.
        """
        parts = _split_key(raw)
        if parts is None:
            return None
        return cls(entity_type_id=parts[0], bundle=parts[1])

    def __str__(self) -> str:
        return f"{self.entity_type_id}:{self.bundle}"


@dataclass(frozen=True, slots=True, kw_only=True)
class ViewRouteKey:
    """View and page display pair (value object).

    Attributes:
        view_id: View machine name.
        display_id: Display machine name within the view.
    """

    view_id: str
    display_id: str

    @classmethod
    def parse(cls, raw: object) -> Self | None:
        """Parse "{view_id}:{display_id}"; None when malformed."""
        parts = _split_key(raw)
        if parts is None:
            return None
        return cls(view_id=parts[0], display_id=parts[1])

    def __str__(self) -> str:
        return f"{self.view_id}:{self.display_id}"
