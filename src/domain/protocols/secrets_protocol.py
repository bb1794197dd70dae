"""Secrets management protocol (port).

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (EnvAdapter)
    - Application uses protocol (backend-agnostic)
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import SecretsError


class SecretsProtocol(Protocol):
    """Read-only access to shared secrets.

    Implementations:
        - EnvAdapter: environment variables
    """

    def get_secret(self, secret_path: str) -> Result[str, SecretsError]:
        """Get a single secret value.

        Args:
            secret_path: Path like 'routes/secret'.

        Returns:
            Success(secret_value) if found and non-blank.
            Failure(SecretsError) otherwise.
        """
        ...
