"""EntityRepository protocol for content entity storage and queries.

Port (interface) for hexagonal architecture. Infrastructure implements it
(in-memory catalog, or a client of the CMS).
"""

from typing import Protocol

from src.domain.entities import ContentEntity, EntityTypeDefinition
from src.domain.value_objects import EntityQuery


class EntityRepository(Protocol):
    """Entity storage protocol (port).

    This is a Protocol (not ABC) for structural typing. Implementations
    don't need to inherit from this.

    Errors raised by implementations are not absorbed by callers: storage
    failures surface as integration problems.
    """

    async def get_definition(self, entity_type_id: str) -> EntityTypeDefinition | None:
        """Find an entity type definition.

        Args:
            entity_type_id: Entity type machine name.

        Returns:
            Definition if the type exists, None otherwise.
        """
        ...

    async def list_definitions(self) -> list[EntityTypeDefinition]:
        """List every entity type definition."""
        ...

    async def get_bundles(self, entity_type_id: str) -> list[str]:
        """List bundle names of an entity type (empty for bundle-less types)."""
        ...

    async def load(self, entity_type_id: str, entity_id: int | str) -> ContentEntity | None:
        """Load one entity.

        Args:
            entity_type_id: Entity type machine name.
            entity_id: Storage identifier.

        Returns:
            Entity if found, None otherwise.
        """
        ...

    async def load_multiple(
        self, entity_type_id: str, entity_ids: list[int | str]
    ) -> dict[str, ContentEntity]:
        """Load several entities, keyed by str(id). Missing ids are absent."""
        ...

    async def query_ids(self, query: EntityQuery) -> list[int | str]:
        """Run a keyset query.

        Args:
            query: Bundle/published filters, exclusive lower id bound, limit.

        Returns:
            Matching ids, ascending, at most query.limit of them.
        """
        ...
