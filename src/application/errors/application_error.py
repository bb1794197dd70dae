"""Application layer error types.

Application errors are what handlers and application services hand to the
presentation layer when a request cannot be served. Presentation decides
the HTTP status from the code.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.FORBIDDEN,
        ...     message="Invalid routes feed secret",
        ... )
    """

    QUERY_VALIDATION_FAILED = "query_validation_failed"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFIGURATION_ERROR = "configuration_error"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable message, safe to show to clients.
        domain_error: Underlying domain error, if any (never shown to clients).
        details: Additional context as key-value pairs.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.CONFIGURATION_ERROR,
        ...     message="Routes feed secret is not configured",
        ...     domain_error=secrets_error,
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None
