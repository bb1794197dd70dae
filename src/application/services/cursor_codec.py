"""Routes feed cursor codec.

Cursors are compact JSON objects in unpadded URL-safe base64. Decoding
never raises: anything that is not a well-formed cursor decodes to None,
which callers treat as "start of the views segment".

Payload keys:
    {"segment": "views", "index": 3}
    {"segment": "entities", "bundle_index": 1, "last_id": "42"}

Example:
    >>> token = encode_cursor(EntitiesCursor(bundle_index=1, last_id="42"))
    >>> decode_cursor(token)
    EntitiesCursor(bundle_index=1, last_id='42')
"""

import base64
import binascii
import json
from typing import Any

from src.core.constants import MAX_CURSOR_LENGTH
from src.domain.enums import CursorSegment
from src.domain.value_objects import CursorState, EntitiesCursor, ViewsCursor


def encode_cursor(state: CursorState) -> str:
    """Encode a cursor state as an opaque URL-safe token.

    Args:
        state: Views or entities cursor.

    Returns:
        Unpadded URL-safe base64 of the compact JSON payload.
    """
    payload: dict[str, Any]
    match state:
        case ViewsCursor(index=index):
            payload = {"segment": CursorSegment.VIEWS.value, "index": index}
        case EntitiesCursor(bundle_index=bundle_index, last_id=last_id):
            payload = {
                "segment": CursorSegment.ENTITIES.value,
                "bundle_index": bundle_index,
                "last_id": last_id,
            }

    raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def decode_cursor(token: str | None) -> CursorState | None:
    """Decode a cursor token.

    Args:
        token: Token from page[cursor], possibly missing padding.

    Returns:
        Cursor state, or None for a missing, oversized or malformed token.
    """
    if not token or len(token) > MAX_CURSOR_LENGTH:
        return None

    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.b64decode(padded, altchars=b"-_", validate=True)
        data = json.loads(raw.decode("utf-8"))
    except (binascii.Error, ValueError, UnicodeDecodeError):
        return None

    if not isinstance(data, dict):
        return None

    segment = data.get("segment", CursorSegment.VIEWS.value)
    if segment == CursorSegment.VIEWS.value:
        return ViewsCursor(index=_as_index(data.get("index")))

    return EntitiesCursor(
        bundle_index=_as_index(data.get("bundle_index")),
        last_id=_as_last_id(data.get("last_id")),
    )


def _as_index(value: object) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return 0


def _as_last_id(value: object) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str) and value != "":
        return value
    return None
