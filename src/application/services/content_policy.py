"""Access and headless policy.

Access and headless eligibility are independent: content can be visible
but not headless (served by the CMS origin), or hidden regardless of
headless status (not found).
"""

from src.domain.entities import ContentEntity, ViewDefinition
from src.domain.protocols import AccessChecker
from src.domain.value_objects import BundleKey, FrontendConfig, ViewRouteKey


class ContentPolicy:
    """Access checks and headless eligibility for entities and views."""

    def __init__(self, config: FrontendConfig, access: AccessChecker) -> None:
        self._config = config
        self._access = access

    async def can_view_entity(self, entity: ContentEntity) -> bool:
        return await self._access.can_view_entity(entity)

    async def can_view_display(self, view: ViewDefinition, display_id: str) -> bool:
        return await self._access.can_view_display(view, display_id)

    def is_headless(self, entity_type_id: str, bundle: str) -> bool:
        """Whether a bundle is rendered by the frontend.

        Args:
            entity_type_id: Entity type machine name.
            bundle: Bundle machine name.

        Returns:
            True in allow-all mode or when "{type}:{bundle}" is allow-listed.
        """
        if self._config.enable_all:
            return True
        key = str(BundleKey(entity_type_id=entity_type_id, bundle=bundle))
        return key in self._config.headless_bundles

    def is_view_headless(self, view_id: str, display_id: str) -> bool:
        """Whether a view display is rendered by the frontend."""
        if self._config.enable_all_views:
            return True
        key = str(ViewRouteKey(view_id=view_id, display_id=display_id))
        return key in self._config.headless_views
