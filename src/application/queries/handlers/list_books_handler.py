"""ListBooks and ListBooksByAuthor query handlers.

Both return BookListResult; they share a module the way list handlers for
one resource are grouped elsewhere.
"""

from src.application.dtos.book_dtos import BookListResult
from src.application.errors.resource_errors import author_not_found
from src.application.mediator import CancellationToken
from src.application.queries.book_queries import ListBooks, ListBooksByAuthor
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.author_repository import AuthorRepository
from src.domain.protocols.book_repository import BookRepository


class ListBooksHandler:
    """Handler for ListBooks query. Never fails."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def handle(
        self, query: ListBooks, cancellation: CancellationToken
    ) -> Result[BookListResult, DomainError]:
        books = await self._book_repo.list_all()
        return Success(value=BookListResult.from_entities(books))


class ListBooksByAuthorHandler:
    """Handler for ListBooksByAuthor query.

    Dependencies (injected via constructor):
        - BookRepository: For data retrieval
        - AuthorRepository: To distinguish "unknown author" from "no books"
    """

    def __init__(
        self,
        book_repo: BookRepository,
        author_repo: AuthorRepository,
    ) -> None:
        self._book_repo = book_repo
        self._author_repo = author_repo

    async def handle(
        self, query: ListBooksByAuthor, cancellation: CancellationToken
    ) -> Result[BookListResult, DomainError]:
        """Handle ListBooksByAuthor query.

        Returns:
            Success(BookListResult): Author's books (possibly empty).
            Failure(NotFoundError): Author does not exist.
        """
        if await self._author_repo.get(query.author_id) is None:
            return Failure(error=author_not_found(query.author_id))

        books = await self._book_repo.list_by_author(query.author_id)
        return Success(value=BookListResult.from_entities(books))
