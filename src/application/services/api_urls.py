"""JSON:API URL builders."""

from src.domain.entities import ContentEntity
from src.domain.value_objects import ViewRouteKey


def entity_resource_url(base_path: str, entity: ContentEntity) -> str:
    """Entity resource URL: {base}/{entity_type}/{bundle}/{uuid}."""
    return f"{base_path}/{entity.entity_type_id}/{entity.bundle}/{entity.uuid}"


def view_data_url(base_path: str, key: ViewRouteKey) -> str:
    """View data URL: {base}/views/{view_id}/{display_id}."""
    return f"{base_path}/views/{key.view_id}/{key.display_id}"


def external_url(origin_base_url: str | None, request_origin: str | None, path: str) -> str:
    """URL of a path on the CMS origin.

    Args:
        origin_base_url: Configured origin, preferred when set.
        request_origin: Scheme and host of the live request.
        path: Canonical path.

    Returns:
        Origin (without trailing slash) followed by path; just path when
        no origin is known.
    """
    base = origin_base_url or request_origin or ""
    return base.rstrip("/") + path
