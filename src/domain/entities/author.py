"""Author domain entity.

An author owns zero or more books. Email addresses are unique across
authors (enforced by the command handlers, not the entity).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.validators import validate_email, validate_name


@dataclass
class Author:
    """Author entity.

    Attributes:
        id: Unique author identifier (UUIDv7).
        name: Display name (non-blank, stripped).
        email: Email address (normalized to lowercase).
        created_at: When the author was created.
        updated_at: When the author was last modified (None if never).

    Example:
        >>> author = Author(id=uuid7(), name="John Doe", email="John.Doe@example.com")
        >>> author.email
        'john.doe@example.com'
    """

    id: UUID
    name: str
    email: str
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate and normalize fields.

        Raises:
            ValueError: If name or email is invalid.
        """
        self.name = validate_name(self.name)
        self.email = validate_email(self.email)

    def apply_update(self, *, name: str, email: str) -> None:
        """Replace mutable fields and stamp updated_at.

        Args:
            name: New display name.
            email: New email address.

        Raises:
            ValueError: If name or email is invalid.
        """
        self.name = validate_name(name)
        self.email = validate_email(email)
        self.updated_at = datetime.now(UTC)

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name={self.name!r}, email={self.email!r})"
