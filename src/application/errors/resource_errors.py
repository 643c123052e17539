"""Domain error factories shared by author and book handlers.

Each factory returns a DomainError value (never raises); handlers wrap it
in Failure(error=...).
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError, ValidationError


def author_not_found(author_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.AUTHOR_NOT_FOUND,
        message=f"Author with ID {author_id} not found",
        resource_type="Author",
        resource_id=str(author_id),
    )


def book_not_found(book_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.BOOK_NOT_FOUND,
        message=f"Book with ID {book_id} not found",
        resource_type="Book",
        resource_id=str(book_id),
    )


def email_already_exists(email: str) -> ConflictError:
    return ConflictError(
        code=ErrorCode.EMAIL_ALREADY_EXISTS,
        message=f"An author with email {email} already exists",
        resource_type="Author",
        conflicting_field="email",
    )


def author_has_books(author_id: UUID, book_count: int) -> ConflictError:
    """Author cannot be deleted while books reference it."""
    return ConflictError(
        code=ErrorCode.AUTHOR_HAS_BOOKS,
        message=(
            f"Author with ID {author_id} still has {book_count} book(s); "
            f"delete or reassign them first"
        ),
        resource_type="Author",
        conflicting_field="books",
        details={"book_count": str(book_count)},
    )


def invalid_input(error: ValueError, field: str | None = None) -> ValidationError:
    """Wrap an entity validation ValueError."""
    return ValidationError(
        code=ErrorCode.VALIDATION_FAILED,
        message=str(error),
        field=field,
    )
