"""Domain enums.

Available Enums:
    - ResolutionKind: What a resolved path points at (entity, view, redirect, route)
    - LangcodeFallback: Language policy when no langcode is requested
    - CursorSegment: Routes feed segments (views, entities)
"""

from src.domain.enums.cursor_segment import CursorSegment
from src.domain.enums.langcode_fallback import LangcodeFallback
from src.domain.enums.resolution_kind import ResolutionKind

__all__ = [
    "CursorSegment",
    "LangcodeFallback",
    "ResolutionKind",
]
