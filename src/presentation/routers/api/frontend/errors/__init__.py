"""JSON:API error documents and exception handlers.

Exports:
    ErrorDocument: Top-level JSON:API error document schema
    ErrorObject: One JSON:API error object
    ErrorResponseBuilder: Utility for building error responses
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from src.presentation.routers.api.frontend.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from src.presentation.routers.api.frontend.errors.exception_handlers import (
    register_exception_handlers,
)
from src.presentation.routers.api.frontend.errors.jsonapi_error import (
    ErrorDocument,
    ErrorMeta,
    ErrorObject,
)

__all__ = [
    "ErrorDocument",
    "ErrorMeta",
    "ErrorObject",
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
