"""Resolution outcome kinds.

Usage:
    from src.domain.enums import ResolutionKind

    if result.kind == ResolutionKind.ENTITY:
        fetch(result.jsonapi_url)
"""

from enum import Enum


class ResolutionKind(str, Enum):
    """What a resolved path points at.

    String Enum:
        Inherits from str so values serialize directly into responses.

    ROUTE is reserved for resolver extensions that recognize a CMS route
    with no API resource behind it; the frontend proxies those paths.
    """

    ENTITY = "entity"
    VIEW = "view"
    REDIRECT = "redirect"
    ROUTE = "route"
