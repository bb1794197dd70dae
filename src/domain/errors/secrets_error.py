"""Secrets retrieval error.

Usage:
    from src.domain.errors import SecretsError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=SecretsError(
        code=ErrorCode.SECRET_NOT_FOUND,
        message="Secret not found: routes/secret",
    ))
"""

from dataclasses import dataclass

from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsError(DomainError):
    """Secret could not be read from the configured backend."""
