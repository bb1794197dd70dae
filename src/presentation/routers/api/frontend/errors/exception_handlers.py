"""Global exception handlers for FastAPI application.

Render every error that escapes a route (framework HTTP errors, request
validation failures, unhandled exceptions) as a JSON:API error document,
so clients of the frontend endpoints never see another error shape.

Handlers:
    http_exception_handler: HTTPException -> its own status
    validation_exception_handler: RequestValidationError -> 400
    generic_exception_handler: anything else -> 500

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from src.application.errors import ApplicationErrorCode
from src.presentation.routers.api.frontend.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id

# HTTP status code to (title, code)
_HTTP_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad_request"),
    403: ("Forbidden", "forbidden"),
    404: ("Not Found", "not_found"),
    405: ("Method Not Allowed", "method_not_allowed"),
    406: ("Not Acceptable", "not_acceptable"),
    500: ("Internal Server Error", "internal_server_error"),
    503: ("Service Unavailable", "service_unavailable"),
}


def _status_info(status_code: int) -> tuple[str, str]:
    return _HTTP_STATUS_INFO.get(status_code, ("Error", "error"))


def _request_trace_id(request: Request) -> str | None:
    return getattr(request.state, "trace_id", None) or get_trace_id()


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to a JSON:API error response.

    Covers the routes feed secret guard, unknown routes (404) and
    unsupported methods (405). Headers set on the exception are kept.

    Args:
        request: FastAPI Request object.
        exc: HTTPException raised by a route or dependency.

    Returns:
        JSONResponse with an ErrorDocument.
    """
    # Registered only for HTTPException
    assert isinstance(exc, HTTPException)

    title, code = _status_info(exc.status_code)
    return ErrorResponseBuilder.build(
        status_code=exc.status_code,
        code=code,
        title=title,
        detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
        trace_id=_request_trace_id(request),
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert RequestValidationError to a 400 JSON:API error response.

    Every input of these endpoints is a query parameter or header, so a
    validation failure is a malformed request rather than an entity error.

    Args:
        request: FastAPI Request object.
        exc: RequestValidationError from parameter validation.

    Returns:
        JSONResponse with an ErrorDocument naming the offending parameter.
    """
    assert isinstance(exc, RequestValidationError)

    problems: list[str] = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("query", "header")]
        name = ".".join(loc) if loc else "request"
        problems.append(f"{name}: {error.get('msg', 'invalid value')}")

    return ErrorResponseBuilder.build(
        status_code=status.HTTP_400_BAD_REQUEST,
        code=ApplicationErrorCode.QUERY_VALIDATION_FAILED.value,
        title="Bad Request",
        detail="; ".join(problems) or "Request validation failed",
        trace_id=_request_trace_id(request),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected Python exceptions.

    Logs the exception and answers 500 without leaking internal details.

    Args:
        request: FastAPI Request object
        exc: Unhandled exception

    Returns:
        JSONResponse with an ErrorDocument (500 Internal Server Error)
    """
    from src.core.container import get_logger

    trace_id = _request_trace_id(request)
    get_logger().error(
        "Unhandled exception",
        error=exc,
        trace_id=trace_id,
        request_path=request.url.path,
        request_method=request.method,
    )

    return ErrorResponseBuilder.build(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="internal_server_error",
        title="Internal Server Error",
        detail="An unexpected error occurred. Please report the trace ID.",
        trace_id=trace_id,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
