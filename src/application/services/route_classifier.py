"""Route classifier.

Turns a route table match into either a view route key or a loaded content
entity. Anything else is unclassifiable and left to resolver extensions.

Decision order:
    1. "view.{view_id}.{display_id}" route names are view routes.
    2. A route parameter already holding a ContentEntity wins.
    3. "entity.{type}.canonical" routes load the "{type}" parameter.
    4. Any parameter named after a content entity type that loads.
"""

from typing import Any

from src.domain.entities import ContentEntity, RouteMatch
from src.domain.protocols import EntityRepository
from src.domain.value_objects import ViewRouteKey

VIEW_ROUTE_PREFIX = "view."


class RouteClassifier:
    """Classify matched routes.

    Dependencies (injected via constructor):
        - EntityRepository: Entity type definitions and entity loading
    """

    def __init__(self, entities: EntityRepository) -> None:
        self._entities = entities

    async def classify(self, match: RouteMatch) -> ViewRouteKey | ContentEntity | None:
        """Classify a route match.

        Args:
            match: Route table match for the internal path.

        Returns:
            ViewRouteKey for view routes, ContentEntity for entity routes,
            None when the route is neither.
        """
        if match.route_name.startswith(VIEW_ROUTE_PREFIX):
            return parse_view_route_name(match.route_name)
        return await self._extract_entity(match.route_name, match.parameters)

    async def _extract_entity(
        self, route_name: str, parameters: dict[str, Any]
    ) -> ContentEntity | None:
        for value in parameters.values():
            if isinstance(value, ContentEntity):
                return value

        entity_type_id = canonical_entity_type(route_name)
        if entity_type_id is not None and entity_type_id in parameters:
            entity = await self._load(entity_type_id, parameters[entity_type_id])
            if entity is not None:
                return entity

        for name, value in parameters.items():
            if not isinstance(name, str):
                continue
            entity = await self._load(name, value)
            if entity is not None:
                return entity

        return None

    async def _load(self, entity_type_id: str, value: object) -> ContentEntity | None:
        definition = await self._entities.get_definition(entity_type_id)
        if definition is None or not definition.is_content:
            return None

        if isinstance(value, ContentEntity):
            return value
        if isinstance(value, bool) or not isinstance(value, int | str):
            return None
        if value == "":
            return None

        return await self._entities.load(entity_type_id, value)


def parse_view_route_name(route_name: str) -> ViewRouteKey | None:
    """Parse "view.{view_id}.{display_id}".

    Returns:
        ViewRouteKey, or None with fewer than three segments or blank ids.
    """
    parts = route_name.split(".")
    if len(parts) < 3 or not parts[1] or not parts[2]:
        return None
    return ViewRouteKey(view_id=parts[1], display_id=parts[2])


def canonical_entity_type(route_name: str) -> str | None:
    """Entity type of an "entity.{type}.canonical" route name, else None."""
    parts = route_name.split(".")
    if len(parts) != 3 or parts[0] != "entity" or parts[2] != "canonical":
        return None
    return parts[1] or None
