"""Book repository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities.book import Book


class BookRepository(Protocol):
    """Protocol for book persistence operations.

    Same conventions as AuthorRepository: entities in, entity copies out,
    None/False for missing rows.
    """

    async def create(self, book: Book) -> Book:
        """Store a new book."""
        ...

    async def get(self, book_id: UUID) -> Book | None:
        """Find book by ID.

        Returns:
            Book entity if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[Book]:
        """List all books in insertion order."""
        ...

    async def list_by_author(self, author_id: UUID) -> list[Book]:
        """List books written by one author.

        Args:
            author_id: Owning author's identifier.

        Returns:
            Books whose author_id matches (empty list if none).
        """
        ...

    async def update(self, book: Book) -> Book | None:
        """Replace a stored book.

        Returns:
            The stored book, or None if no book has that id.
        """
        ...

    async def delete(self, book_id: UUID) -> bool:
        """Delete book by ID.

        Returns:
            True if a book was removed, False if none existed.
        """
        ...
