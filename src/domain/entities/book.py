"""Book domain entity."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.domain.validators import validate_description, validate_title


@dataclass
class Book:
    """Book entity.

    Every book references exactly one existing author via author_id.

    Attributes:
        id: Unique book identifier (UUIDv7).
        title: Book title (non-blank, stripped).
        description: Free-text description (may be empty).
        author_id: Owning author's identifier.
        created_at: When the book was created.
        updated_at: When the book was last modified (None if never).
    """

    id: UUID
    title: str
    description: str
    author_id: UUID
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate and normalize fields.

        Raises:
            ValueError: If title or description is invalid.
        """
        self.title = validate_title(self.title)
        self.description = validate_description(self.description)

    def apply_update(self, *, title: str, description: str, author_id: UUID) -> None:
        """Replace mutable fields and stamp updated_at.

        Raises:
            ValueError: If title or description is invalid.
        """
        self.title = validate_title(title)
        self.description = validate_description(description)
        self.author_id = author_id
        self.updated_at = datetime.now(UTC)

    def __repr__(self) -> str:
        return (
            f"Book(id={self.id}, title={self.title!r}, author_id={self.author_id})"
        )
