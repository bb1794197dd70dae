"""Domain errors package.

Usage:
    from src.domain.errors import SecretsError, SnapshotError
"""

from src.domain.errors.secrets_error import SecretsError
from src.domain.errors.snapshot_error import SnapshotError

__all__ = [
    "SecretsError",
    "SnapshotError",
]
