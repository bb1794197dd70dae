"""Environment variables adapter for secrets.

Implements SecretsProtocol using process environment variables.

File: env_adapter.py → class EnvAdapter (PEP 8 naming)
"""

import os

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.errors import SecretsError


class EnvAdapter:
    """Secrets from environment variables.

    Converts secret paths to environment variable names:
        - 'routes/secret' → ROUTES_SECRET

    Values are trimmed; a blank value counts as not set.
    """

    def get_secret(self, secret_path: str) -> Result[str, SecretsError]:
        """Get secret from environment variable.

        Args:
            secret_path: Path like 'routes/secret'.

        Returns:
            Success(secret_value) if the env var holds a non-blank value.
            Failure(SecretsError) with SECRET_NOT_FOUND otherwise.

        Example:
            >>> adapter = EnvAdapter()
            >>> result = adapter.get_secret("routes/secret")
            >>> # If ROUTES_SECRET is set: Success(value="...")
        """
        env_var_name = secret_path.replace("/", "_").upper()
        secret_value = (os.getenv(env_var_name) or "").strip()

        if secret_value == "":
            return Failure(
                error=SecretsError(
                    code=ErrorCode.SECRET_NOT_FOUND,
                    message=f"Environment variable not set: {env_var_name}",
                    details={"secret_path": secret_path},
                )
            )

        return Success(value=secret_value)
