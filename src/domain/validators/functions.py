"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere:
- Domain entities call them from __post_init__
- Annotated Pydantic types (src/domain/types.py) call them via AfterValidator

Validators are pure functions that raise ValueError on validation failure.
"""

from email_validator import EmailNotValidError
from email_validator import validate_email as _validate_email_address

AUTHOR_NAME_MAX_LENGTH = 100
BOOK_TITLE_MAX_LENGTH = 200
BOOK_DESCRIPTION_MAX_LENGTH = 2000


def validate_email(v: str) -> str:
    """Validate email format.

    Uses the email-validator library (syntax only, no DNS lookup).

    Args:
        v: Email address to validate.

    Returns:
        Normalized email (lowercase).

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("John.Doe@Example.COM")
        'john.doe@example.com'
        >>> validate_email("invalid")
        ValueError: Invalid email format: invalid
    """
    try:
        validated = _validate_email_address(v, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"Invalid email format: {v}") from e
    return validated.normalized.lower()


def validate_name(v: str) -> str:
    """Validate an author name.

    Args:
        v: Name to validate.

    Returns:
        Name with surrounding whitespace stripped.

    Raises:
        ValueError: If name is blank or too long.
    """
    stripped = v.strip()
    if not stripped:
        raise ValueError("Name cannot be empty")
    if len(stripped) > AUTHOR_NAME_MAX_LENGTH:
        raise ValueError(
            f"Name cannot exceed {AUTHOR_NAME_MAX_LENGTH} characters"
        )
    return stripped


def validate_title(v: str) -> str:
    """Validate a book title.

    Args:
        v: Title to validate.

    Returns:
        Title with surrounding whitespace stripped.

    Raises:
        ValueError: If title is blank or too long.
    """
    stripped = v.strip()
    if not stripped:
        raise ValueError("Title cannot be empty")
    if len(stripped) > BOOK_TITLE_MAX_LENGTH:
        raise ValueError(
            f"Title cannot exceed {BOOK_TITLE_MAX_LENGTH} characters"
        )
    return stripped


def validate_description(v: str) -> str:
    """Validate a book description (may be empty)."""
    if len(v) > BOOK_DESCRIPTION_MAX_LENGTH:
        raise ValueError(
            f"Description cannot exceed {BOOK_DESCRIPTION_MAX_LENGTH} characters"
        )
    return v
