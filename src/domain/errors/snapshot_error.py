"""Content snapshot loading error."""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SnapshotError(DomainError):
    """Content snapshot file missing, unreadable or malformed.

    Attributes:
        code: SNAPSHOT_NOT_FOUND, SNAPSHOT_INVALID_JSON or SNAPSHOT_INVALID_SHAPE.
        message: Human-readable message.
        details: Context such as the file path.
    """
