"""JSON snapshot loader for the in-memory catalog.

Snapshot shape (every top-level key optional):

    {
      "languages": {"default": "en", "available": ["en", "fr"]},
      "entity_types": [
        {"id": "node", "canonical_template": "/node/{id}",
         "bundles": ["page", "article"]}
      ],
      "entities": [
        {"entity_type": "node", "bundle": "page", "id": 1,
         "uuid": "...", "published": true}
      ],
      "aliases": [{"path": "/node/1", "alias": "/about-us", "langcode": "en"}],
      "routes": [{"path": "/contact", "route_name": "contact.site_page"}],
      "views": [
        {"id": "blog", "displays": [{"id": "page_1", "path": "blog"}]}
      ],
      "redirects": [{"source": "/old", "to": "/new", "status": 301}]
    }

Usage:
    match load_snapshot(Path("content.json")):
        case Success(value=catalog):
            ...
        case Failure(error=error):
            logger.error("Snapshot rejected", code=error.code.value)
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.entities import (
    ContentEntity,
    EntityTypeDefinition,
    RouteMatch,
    ViewDefinition,
    ViewDisplay,
)
from src.domain.errors import SnapshotError
from src.infrastructure.content.memory_catalog import LANGUAGE_NEUTRAL, ContentCatalog


class _Model(BaseModel):
    model_config = ConfigDict(extra="ignore")


class _Languages(_Model):
    default: str = "en"
    available: list[str] = Field(default_factory=list)


class _EntityType(_Model):
    id: str
    label: str = ""
    is_content: bool = True
    canonical_template: str | None = None
    id_key: str | None = "id"
    bundle_key: str | None = "type"
    status_key: str | None = "status"
    bundles: list[str] = Field(default_factory=list)


class _Entity(_Model):
    entity_type: str
    bundle: str | None = None
    id: int | str
    uuid: str
    langcode: str = "en"
    published: bool = True
    label: str = ""


class _Alias(_Model):
    path: str
    alias: str
    langcode: str = LANGUAGE_NEUTRAL


class _Route(_Model):
    path: str
    route_name: str
    parameters: dict[str, Any] = Field(default_factory=dict)


class _Display(_Model):
    id: str
    plugin: str = "page"
    path: str | None = None
    restricted: bool = False


class _View(_Model):
    id: str
    label: str = ""
    enabled: bool = True
    displays: list[_Display] = Field(default_factory=list)


class _Redirect(_Model):
    source: str
    to: Any
    status: Any = 301
    query: dict[str, str] = Field(default_factory=dict)
    langcode: str = LANGUAGE_NEUTRAL


class _Snapshot(_Model):
    languages: _Languages = Field(default_factory=_Languages)
    entity_types: list[_EntityType] = Field(default_factory=list)
    entities: list[_Entity] = Field(default_factory=list)
    aliases: list[_Alias] = Field(default_factory=list)
    routes: list[_Route] = Field(default_factory=list)
    views: list[_View] = Field(default_factory=list)
    redirects: list[_Redirect] = Field(default_factory=list)


def load_snapshot(path: Path | str) -> Result[ContentCatalog, SnapshotError]:
    """Build a catalog from a JSON snapshot file.

    Args:
        path: Snapshot file location.

    Returns:
        Success(ContentCatalog) on success.
        Failure(SnapshotError) with SNAPSHOT_NOT_FOUND, SNAPSHOT_INVALID_JSON
        or SNAPSHOT_INVALID_SHAPE.
    """
    file_path = Path(path)
    details = {"path": str(file_path)}

    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        return Failure(
            error=SnapshotError(
                code=ErrorCode.SNAPSHOT_NOT_FOUND,
                message=f"Cannot read content snapshot: {e.strerror or e}",
                details=details,
            )
        )

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        return Failure(
            error=SnapshotError(
                code=ErrorCode.SNAPSHOT_INVALID_JSON,
                message=f"Content snapshot is not valid JSON: {e.msg}",
                details=details,
            )
        )

    try:
        snapshot = _Snapshot.model_validate(data)
        catalog = _build_catalog(snapshot)
    except (ValidationError, KeyError) as e:
        return Failure(
            error=SnapshotError(
                code=ErrorCode.SNAPSHOT_INVALID_SHAPE,
                message=f"Content snapshot has an invalid shape: {e}",
                details=details,
            )
        )

    return Success(value=catalog)


def _build_catalog(snapshot: _Snapshot) -> ContentCatalog:
    catalog = ContentCatalog()
    catalog.set_languages(snapshot.languages.default, snapshot.languages.available)

    for entity_type in snapshot.entity_types:
        catalog.add_entity_type(
            EntityTypeDefinition(
                id=entity_type.id,
                label=entity_type.label,
                is_content=entity_type.is_content,
                canonical_template=entity_type.canonical_template,
                id_key=entity_type.id_key,
                bundle_key=entity_type.bundle_key,
                status_key=entity_type.status_key,
            ),
            bundles=entity_type.bundles,
        )

    for entity in snapshot.entities:
        catalog.add_entity(
            ContentEntity(
                entity_type_id=entity.entity_type,
                bundle=entity.bundle or entity.entity_type,
                id=entity.id,
                uuid=entity.uuid,
                langcode=entity.langcode,
                published=entity.published,
                label=entity.label,
            )
        )

    for alias in snapshot.aliases:
        catalog.add_alias(alias.path, alias.alias, alias.langcode)

    for route in snapshot.routes:
        catalog.add_route(
            route.path,
            RouteMatch(route_name=route.route_name, parameters=route.parameters),
        )

    for view in snapshot.views:
        catalog.add_view(
            ViewDefinition(
                id=view.id,
                label=view.label,
                enabled=view.enabled,
                displays={
                    display.id: ViewDisplay(
                        id=display.id,
                        plugin=display.plugin,
                        path=display.path,
                        restricted=display.restricted,
                    )
                    for display in view.displays
                },
            )
        )

    for redirect in snapshot.redirects:
        catalog.add_redirect(
            redirect.source,
            redirect.to,
            redirect.status,
            query=redirect.query,
            langcode=redirect.langcode,
        )

    return catalog
