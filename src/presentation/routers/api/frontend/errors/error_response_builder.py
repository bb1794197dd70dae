"""Error response builder for JSON:API error documents.

Builds error responses from application layer errors. Every error
response carries the JSON:API content type, Cache-Control: no-store and
X-Content-Type-Options: nosniff.

Exports:
    ErrorResponseBuilder: Utility class for building error responses
"""

from fastapi import status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.constants import JSONAPI_CONTENT_TYPE
from src.presentation.routers.api.frontend.errors.jsonapi_error import (
    ErrorDocument,
    ErrorMeta,
    ErrorObject,
)

_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFIGURATION_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.QUERY_VALIDATION_FAILED: "Bad Request",
    ApplicationErrorCode.FORBIDDEN: "Forbidden",
    ApplicationErrorCode.NOT_FOUND: "Not Found",
    ApplicationErrorCode.CONFIGURATION_ERROR: "Configuration Error",
}


class ErrorResponseBuilder:
    """Build JSON:API error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.QUERY_VALIDATION_FAILED,
        ...     message="Missing required query parameter: path",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        trace_id: str | None,
    ) -> JSONResponse:
        """Convert ApplicationError to a JSON:API error response.

        Args:
            error: Application layer error to convert
            trace_id: Request trace ID for debugging

        Returns:
            JSONResponse with an ErrorDocument body
        """
        return ErrorResponseBuilder.build(
            status_code=ErrorResponseBuilder.get_status_code(error.code),
            code=error.code.value,
            title=ErrorResponseBuilder.get_title(error.code),
            detail=error.message,
            trace_id=trace_id,
        )

    @staticmethod
    def build(
        *,
        status_code: int,
        code: str,
        title: str,
        detail: str,
        trace_id: str | None,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Build an error response from its parts.

        Args:
            status_code: HTTP status code.
            code: Machine-readable error code.
            title: Short summary.
            detail: Occurrence-specific explanation.
            trace_id: Request trace ID.
            headers: Extra response headers (e.g. from HTTPException).

        Returns:
            JSONResponse with the error document and no-store headers.
        """
        document = ErrorDocument(
            errors=[
                ErrorObject(
                    status=str(status_code),
                    code=code,
                    title=title,
                    detail=detail,
                    meta=ErrorMeta(trace_id=trace_id),
                )
            ]
        )

        response = JSONResponse(
            status_code=status_code,
            content=document.model_dump(),
            headers=headers,
            media_type=JSONAPI_CONTENT_TYPE,
        )
        response.headers["Content-Type"] = JSONAPI_CONTENT_TYPE
        response.headers["Cache-Control"] = "no-store"
        response.headers["X-Content-Type-Options"] = "nosniff"
        return response

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.FORBIDDEN)
            403
        """
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        return _TITLES.get(code, "Internal Server Error")
