"""JSON:API error documents.

Error responses of the resolver and the routes feed use the JSON:API
error object format rather than problem details, so frontend clients
parse every response of these endpoints with one JSON:API reader.

Reference: https://jsonapi.org/format/#error-objects

Exports:
    ErrorMeta: Per-error metadata (trace ID)
    ErrorObject: One JSON:API error object
    ErrorDocument: Top-level error document
"""

from pydantic import BaseModel, Field


class ErrorMeta(BaseModel):
    """Non-standard error details.

    Attributes:
        trace_id: Request trace ID for correlating logs.
    """

    trace_id: str | None = Field(None, description="Request trace ID for debugging")


class ErrorObject(BaseModel):
    """One JSON:API error object.

    Attributes:
        status: HTTP status code, as a string per JSON:API.
        code: Machine-readable error code.
        title: Short, human-readable summary of the problem type.
        detail: Explanation specific to this occurrence.
        meta: Trace metadata.

    Examples:
        >>> ErrorObject(
        ...     status="400",
        ...     code="query_validation_failed",
        ...     title="Bad Request",
        ...     detail="Missing required query parameter: path",
        ...     meta=ErrorMeta(trace_id="550e8400-e29b-41d4-a716-446655440000"),
        ... )
    """

    status: str = Field(..., description="HTTP status code", examples=["400"])
    code: str = Field(
        ..., description="Machine-readable error code", examples=["not_found"]
    )
    title: str = Field(..., description="Short summary", examples=["Bad Request"])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Missing required query parameter: path"],
    )
    meta: ErrorMeta = Field(default_factory=ErrorMeta)


class ErrorDocument(BaseModel):
    """Top-level JSON:API error document: {"errors": [...]}."""

    errors: list[ErrorObject] = Field(..., min_length=1)
