"""View listing definitions.

A view is a configured content listing; each of its displays renders it
in some way. Only displays using the "page" plugin own a path.
"""

from dataclasses import dataclass, field

PAGE_DISPLAY_PLUGIN = "page"


@dataclass(frozen=True, slots=True, kw_only=True)
class ViewDisplay:
    """One display of a view.

    Attributes:
        id: Display machine name (e.g. "page_1").
        plugin: Display plugin ("page", "block", "feed", ...).
        path: Route path of a page display, may contain "%" or "{...}"
            argument placeholders.
        restricted: Display requires a permission anonymous users lack.
    """

    id: str
    plugin: str = PAGE_DISPLAY_PLUGIN
    path: str | None = None
    restricted: bool = False

    @property
    def is_page(self) -> bool:
        return self.plugin == PAGE_DISPLAY_PLUGIN


@dataclass(frozen=True, slots=True, kw_only=True)
class ViewDefinition:
    """Configured view with its displays.

    Attributes:
        id: View machine name.
        label: Human-readable name.
        enabled: Disabled views expose no routes.
        displays: Displays keyed by display id.
    """

    id: str
    label: str = ""
    enabled: bool = True
    displays: dict[str, ViewDisplay] = field(default_factory=dict)

    def get_display(self, display_id: str) -> ViewDisplay | None:
        """Look up a display by id."""
        return self.displays.get(display_id)
