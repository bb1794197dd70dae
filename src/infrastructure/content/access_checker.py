"""Identity-aware access checker for catalog content."""

from src.domain.entities import ContentEntity, ViewDefinition
from src.domain.protocols import AccountSwitcher


class CatalogAccessChecker:
    """AccessChecker for the in-memory catalog.

    Anonymous identities see published entities and unrestricted view
    displays; any other identity sees everything.
    """

    def __init__(self, account_switcher: AccountSwitcher) -> None:
        self._account_switcher = account_switcher

    async def can_view_entity(self, entity: ContentEntity) -> bool:
        if not self._account_switcher.current_identity().is_anonymous:
            return True
        return entity.published

    async def can_view_display(self, view: ViewDefinition, display_id: str) -> bool:
        display = view.get_display(display_id)
        if display is None or not view.enabled:
            return False
        if not self._account_switcher.current_identity().is_anonymous:
            return True
        return not display.restricted
