"""Error response builder for RFC 9457 Problem Details.

Builds RFC 9457 compliant error responses from application layer errors.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    to_application_error,
)
from src.core.config import settings
from src.core.errors import ConflictError, DomainError, ValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_STATUS_CODES: dict[ApplicationErrorCode, int] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.QUERY_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ApplicationErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ApplicationErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
}

_TITLES: dict[ApplicationErrorCode, str] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: "Validation Failed",
    ApplicationErrorCode.COMMAND_EXECUTION_FAILED: "Command Execution Failed",
    ApplicationErrorCode.QUERY_FAILED: "Query Failed",
    ApplicationErrorCode.NOT_FOUND: "Resource Not Found",
    ApplicationErrorCode.CONFLICT: "Resource Conflict",
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Author not found",
        ... )
        >>> response = ErrorResponseBuilder.from_application_error(
        ...     error=error,
        ...     request=request,
        ...     correlation_id="12345678-1234-1234-1234-123456789abc",
        ... )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        correlation_id: str | None,
    ) -> JSONResponse:
        """Convert ApplicationError to RFC 9457 JSON response.

        Args:
            error: Application layer error to convert
            request: FastAPI Request object (for instance URL)
            correlation_id: Request correlation ID

        Returns:
            JSONResponse with RFC 9457 ProblemDetails content
        """
        status_code = ErrorResponseBuilder.get_status_code(error.code)

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.code.value}",
            title=ErrorResponseBuilder.get_title(error.code),
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=ErrorResponseBuilder._field_errors(error),
            correlation_id=correlation_id,
        )

        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )

    @staticmethod
    def from_domain_error(
        error: DomainError,
        request: Request,
        correlation_id: str | None,
        *,
        default_code: ApplicationErrorCode = ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
    ) -> JSONResponse:
        """Classify a handler's DomainError and render it as RFC 9457 response.

        Args:
            error: Domain error from Failure.error
            request: FastAPI Request object (for instance URL)
            correlation_id: Request correlation ID
            default_code: Code for unclassified errors (QUERY_FAILED for reads)
        """
        return ErrorResponseBuilder.from_application_error(
            error=to_application_error(error, default_code=default_code),
            request=request,
            correlation_id=correlation_id,
        )

    @staticmethod
    def get_status_code(code: ApplicationErrorCode) -> int:
        """Map application error code to HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(ApplicationErrorCode.CONFLICT)
            409
        """
        return _STATUS_CODES.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)

    @staticmethod
    def get_title(code: ApplicationErrorCode) -> str:
        """Get human-readable title for application error code."""
        return _TITLES.get(code, "Internal Server Error")

    @staticmethod
    def _field_errors(error: ApplicationError) -> list[ErrorDetail] | None:
        domain_error = error.domain_error
        if isinstance(domain_error, ValidationError):
            field = domain_error.field
        elif isinstance(domain_error, ConflictError):
            field = domain_error.conflicting_field
        else:
            return None

        if field is None:
            return None
        return [
            ErrorDetail(
                field=field,
                code=domain_error.code.value,
                message=domain_error.message,
            )
        ]
