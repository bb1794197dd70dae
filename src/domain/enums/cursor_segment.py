"""Routes feed cursor segments."""

from enum import Enum


class CursorSegment(str, Enum):
    """Feed segments, enumerated in this order."""

    VIEWS = "views"
    ENTITIES = "entities"
