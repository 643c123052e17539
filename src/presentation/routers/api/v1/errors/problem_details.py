"""RFC 9457 Problem Details for HTTP APIs.

Pydantic models for structured error responses. Every error response of the
API (handler failures, validation errors, unhandled exceptions) uses
ProblemDetails, and OpenAPI references it for every documented error status.

RFC 9457: https://www.rfc-editor.org/rfc/rfc9457

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: RFC 9457 compliant error response schema
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Individual field-specific error.

    Examples:
        >>> ErrorDetail(
        ...     field="email",
        ...     code="email_already_exists",
        ...     message="An author with email john.doe@example.com already exists",
        ... )
    """

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details for HTTP APIs.

    Attributes:
        type: URI reference identifying the problem type
        title: Short, human-readable summary of the problem type
        status: HTTP status code for this occurrence
        detail: Human-readable explanation specific to this occurrence
        instance: URI reference identifying the specific occurrence
        errors: Optional list of field-specific errors
        correlation_id: Request correlation ID (same as the response header)

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Author with ID 0190... not found",
        ...     instance="/api/v1/authors/0190...",
        ...     correlation_id="12345678-1234-1234-1234-123456789abc",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/not_found"],
    )
    title: str = Field(
        ...,
        description="Short, human-readable summary",
        examples=["Resource Not Found"],
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[404],
    )
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Author with ID 01890a5d-ac96-774b-bcce-b302099a8057 not found"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/authors/01890a5d-ac96-774b-bcce-b302099a8057"],
    )
    errors: list[ErrorDetail] | None = Field(
        None,
        description="List of field-specific errors",
    )
    correlation_id: str | None = Field(
        None,
        description="Request correlation ID for debugging",
    )
