"""Content entity and entity type definition.

A content entity is one addressable piece of content (a node, a taxonomy
term). Its entity type definition says how entities of that type are
keyed, filtered and routed.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class EntityTypeDefinition:
    """Entity type metadata.

    Attributes:
        id: Entity type machine name (e.g. "node", "taxonomy_term").
        label: Human-readable name.
        is_content: Whether this is a content (not config) entity type.
        canonical_template: Internal canonical path with an "{id}"
            placeholder (e.g. "/node/{id}"), None when the type has no
            canonical route.
        id_key: Name of the identifier key, None if the type has none.
        bundle_key: Name of the bundle key, None for bundle-less types.
        status_key: Name of the published flag, None if not publishable.

    Example:
        >>> node = EntityTypeDefinition(id="node", canonical_template="/node/{id}")
        >>> node.canonical_path(7)
        '/node/7'
    """

    id: str
    label: str = ""
    is_content: bool = True
    canonical_template: str | None = None
    id_key: str | None = "id"
    bundle_key: str | None = "type"
    status_key: str | None = "status"

    @property
    def has_canonical_route(self) -> bool:
        """True when entities of this type have a canonical page."""
        return bool(self.canonical_template)

    @property
    def canonical_route_name(self) -> str:
        """Route name of the canonical page, e.g. "entity.node.canonical"."""
        return f"entity.{self.id}.canonical"

    def canonical_path(self, entity_id: int | str) -> str | None:
        """Internal canonical path of one entity.

        Args:
            entity_id: Entity identifier.

        Returns:
            Internal path, or None if the type has no canonical route.
        """
        if not self.canonical_template:
            return None
        return self.canonical_template.replace("{id}", str(entity_id))


@dataclass(frozen=True, slots=True, kw_only=True)
class ContentEntity:
    """Content entity (read model).

    Attributes:
        entity_type_id: Entity type machine name.
        bundle: Bundle machine name (equals entity_type_id for bundle-less types).
        id: Storage identifier, used for keyset pagination.
        uuid: Public identifier exposed in API URLs.
        langcode: Language of this entity.
        published: Published status.
        label: Title/label.
    """

    entity_type_id: str
    bundle: str
    id: int | str
    uuid: str
    langcode: str = "en"
    published: bool = True
    label: str = ""

    @property
    def resource_type(self) -> str:
        """JSON:API resource type name, "{entity_type}--{bundle}"."""
        return f"{self.entity_type_id}--{self.bundle}"
