"""GetBook query handler."""

from src.application.dtos.book_dtos import BookResult
from src.application.errors.resource_errors import book_not_found
from src.application.mediator import CancellationToken
from src.application.queries.book_queries import GetBook
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.book_repository import BookRepository


class GetBookHandler:
    """Handler for GetBook query."""

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    async def handle(
        self, query: GetBook, cancellation: CancellationToken
    ) -> Result[BookResult, DomainError]:
        """Handle GetBook query.

        Returns:
            Success(BookResult): Book found.
            Failure(NotFoundError): Book does not exist.
        """
        book = await self._book_repo.get(query.book_id)
        if book is None:
            return Failure(error=book_not_found(query.book_id))

        return Success(value=BookResult.from_entity(book))
