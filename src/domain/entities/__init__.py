"""Domain entities.

Read models handed to the core by its content collaborators.
"""

from src.domain.entities.content_entity import ContentEntity, EntityTypeDefinition
from src.domain.entities.identity import ANONYMOUS, Identity
from src.domain.entities.routing import RedirectMatch, RouteMatch
from src.domain.entities.view_definition import (
    PAGE_DISPLAY_PLUGIN,
    ViewDefinition,
    ViewDisplay,
)

__all__ = [
    "ANONYMOUS",
    "ContentEntity",
    "EntityTypeDefinition",
    "Identity",
    "PAGE_DISPLAY_PLUGIN",
    "RedirectMatch",
    "RouteMatch",
    "ViewDefinition",
    "ViewDisplay",
]
