"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Secrets management errors (SECRET_*)
- Content snapshot errors (SNAPSHOT_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Secrets management errors
    SECRET_NOT_FOUND = "secret_not_found"

    # Content snapshot errors
    SNAPSHOT_NOT_FOUND = "snapshot_not_found"
    SNAPSHOT_INVALID_JSON = "snapshot_invalid_json"
    SNAPSHOT_INVALID_SHAPE = "snapshot_invalid_shape"
