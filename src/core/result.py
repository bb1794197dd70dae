"""Result types for railway-oriented programming.

Operations that can fail for expected reasons (missing secret, denied feed
access) return a Result instead of raising, so callers handle the failure
explicitly.

Usage:
    def read_routes_secret(secrets: SecretsProtocol) -> Result[str, SecretsError]:
        return secrets.get_secret("routes/secret")

    match read_routes_secret(secrets):
        case Success(value=secret):
            ...
        case Failure(error=error):
            logger.warning("Routes secret unavailable", code=error.code.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
