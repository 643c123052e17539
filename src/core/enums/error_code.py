"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types and the core error dataclasses.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_CONFLICT)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_EMAIL = "invalid_email"
    INVALID_NAME = "invalid_name"
    INVALID_TITLE = "invalid_title"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    AUTHOR_NOT_FOUND = "author_not_found"
    BOOK_NOT_FOUND = "book_not_found"
    RESOURCE_NOT_FOUND = "resource_not_found"

    # Conflict errors
    EMAIL_ALREADY_EXISTS = "email_already_exists"
    AUTHOR_HAS_BOOKS = "author_has_books"
    RESOURCE_CONFLICT = "resource_conflict"
