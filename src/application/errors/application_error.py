"""Application layer error types.

Wraps domain errors returned by command/query handlers with the
application-level classification the presentation layer renders.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    to_application_error: Classify a handler's DomainError
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import ConflictError, DomainError, NotFoundError, ValidationError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Author not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from a handler)
        details: Additional context as key-value pairs
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


def to_application_error(
    error: DomainError,
    *,
    default_code: ApplicationErrorCode = ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
) -> ApplicationError:
    """Classify a DomainError returned inside a Failure.

    Mapping:
        NotFoundError -> NOT_FOUND
        ConflictError -> CONFLICT
        ValidationError -> COMMAND_VALIDATION_FAILED
        anything else -> default_code

    Args:
        error: Domain error from Failure.error.
        default_code: Code for unclassified errors (QUERY_FAILED for reads).

    Returns:
        ApplicationError carrying the original domain error.
    """
    match error:
        case NotFoundError():
            code = ApplicationErrorCode.NOT_FOUND
        case ConflictError():
            code = ApplicationErrorCode.CONFLICT
        case ValidationError():
            code = ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        case _:
            code = default_code

    return ApplicationError(
        code=code,
        message=error.message,
        domain_error=error,
        details=error.details,
    )
