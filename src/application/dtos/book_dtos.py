"""Book DTOs (Data Transfer Objects)."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.book import Book


@dataclass(frozen=True, kw_only=True)
class BookResult:
    """Single book result DTO.

    Attributes:
        id: Book identifier.
        title: Title.
        description: Description.
        author_id: Owning author.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp (None if never updated).
    """

    id: UUID
    title: str
    description: str
    author_id: UUID
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, book: Book) -> "BookResult":
        return cls(
            id=book.id,
            title=book.title,
            description=book.description,
            author_id=book.author_id,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class BookListResult:
    """List of books with count."""

    books: list[BookResult]
    total_count: int

    @classmethod
    def from_entities(cls, books: list[Book]) -> "BookListResult":
        results = [BookResult.from_entity(book) for book in books]
        return cls(books=results, total_count=len(results))
