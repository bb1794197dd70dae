"""Routes feed cursor states.

A cursor is a pure snapshot of enumeration progress. It carries no secret
or capability; the codec turns it into an opaque URL-safe token.

Usage:
    from src.domain.value_objects import EntitiesCursor, ViewsCursor

    match state:
        case ViewsCursor(index=index):
            ...
        case EntitiesCursor(bundle_index=bundle_index, last_id=last_id):
            ...
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class ViewsCursor:
    """Position within the sorted view route list.

    Attributes:
        index: Index of the next view route to emit.
    """

    index: int = 0


@dataclass(frozen=True, slots=True, kw_only=True)
class EntitiesCursor:
    """Position within the sorted bundle key list.

    Attributes:
        bundle_index: Index of the bundle being enumerated.
        last_id: Last entity id fetched from that bundle (keyset position),
            None to start the bundle from its first entity.
    """

    bundle_index: int = 0
    last_id: str | None = None


type CursorState = ViewsCursor | EntitiesCursor
