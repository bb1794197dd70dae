"""Route table and redirect records returned by routing collaborators."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True, kw_only=True)
class RouteMatch:
    """Result of matching an internal path against the route table.

    Attributes:
        route_name: Matched route (e.g. "entity.node.canonical",
            "view.blog.page_1").
        parameters: Route parameters. Values are raw identifiers or
            already-loaded ContentEntity objects.
    """

    route_name: str
    parameters: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True, kw_only=True)
class RedirectMatch:
    """Redirect record as stored by the redirect collaborator.

    Values are whatever the collaborator stored and are validated by the
    redirect layer before use.

    Attributes:
        to: Redirect target (path or absolute URL).
        status_code: HTTP status (int or digit string).
    """

    to: Any
    status_code: Any = None
