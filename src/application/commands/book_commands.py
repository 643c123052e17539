"""Book commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID

from src.application.dtos.book_dtos import BookResult
from src.application.mediator import Request, Unit
from src.core.errors import DomainError
from src.core.result import Result


@dataclass(frozen=True, kw_only=True)
class CreateBook(Request[Result[BookResult, DomainError]]):
    """Create a book for an existing author.

    Attributes:
        title: Book title.
        description: Free-text description.
        author_id: Owning author (must exist).

    Example:
        >>> command = CreateBook(
        ...     title="The Great Book",
        ...     description="A wonderful book",
        ...     author_id=author_id,
        ... )
    """

    title: str
    description: str
    author_id: UUID


@dataclass(frozen=True, kw_only=True)
class UpdateBook(Request[Result[Unit, DomainError]]):
    """Replace an existing book's fields (author may change).

    Attributes:
        book_id: Book to update.
        title: New title.
        description: New description.
        author_id: New owning author (must exist).
    """

    book_id: UUID
    title: str
    description: str
    author_id: UUID


@dataclass(frozen=True, kw_only=True)
class DeleteBook(Request[Result[Unit, DomainError]]):
    """Delete a book.

    Attributes:
        book_id: Book to delete.
    """

    book_id: UUID
