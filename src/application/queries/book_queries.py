"""Book queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID

from src.application.dtos.book_dtos import BookListResult, BookResult
from src.application.mediator import Request
from src.core.errors import DomainError
from src.core.result import Result


@dataclass(frozen=True, kw_only=True)
class GetBook(Request[Result[BookResult, DomainError]]):
    """Get a single book by ID.

    Attributes:
        book_id: Book to retrieve.
    """

    book_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListBooks(Request[Result[BookListResult, DomainError]]):
    """List every book."""


@dataclass(frozen=True, kw_only=True)
class ListBooksByAuthor(Request[Result[BookListResult, DomainError]]):
    """List the books written by one author.

    Fails with NotFoundError when the author does not exist, so an empty
    list always means "author exists but has no books".

    Attributes:
        author_id: Owning author.
    """

    author_id: UUID
