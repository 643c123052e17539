"""Common error classes used across the application.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found
- ConflictError: Resource conflicts (duplicate email, author still has books)

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode

    NotFoundError(
        code=ErrorCode.AUTHOR_NOT_FOUND,
        message="Author not found",
        resource_type="Author",
        resource_id=str(author_id),
    )
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Author, Book).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict.

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, author_id).
    """

    resource_type: str
    conflicting_field: str | None = None
