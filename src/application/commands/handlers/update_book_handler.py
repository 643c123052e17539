"""UpdateBook command handler."""

from src.application.commands.book_commands import UpdateBook
from src.application.errors.resource_errors import (
    author_not_found,
    book_not_found,
    invalid_input,
)
from src.application.mediator import UNIT, CancellationToken, Unit
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.author_repository import AuthorRepository
from src.domain.protocols.book_repository import BookRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class UpdateBookHandler:
    """Handler for UpdateBook command."""

    def __init__(
        self,
        book_repo: BookRepository,
        author_repo: AuthorRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._book_repo = book_repo
        self._author_repo = author_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateBook, cancellation: CancellationToken
    ) -> Result[Unit, DomainError]:
        """Handle UpdateBook command.

        Returns:
            Success(UNIT): Book updated.
            Failure(NotFoundError): Book or (new) author does not exist.
            Failure(ValidationError): Title or description rejected.
        """
        book = await self._book_repo.get(cmd.book_id)
        if book is None:
            return Failure(error=book_not_found(cmd.book_id))

        if await self._author_repo.get(cmd.author_id) is None:
            return Failure(error=author_not_found(cmd.author_id))

        try:
            book.apply_update(
                title=cmd.title,
                description=cmd.description,
                author_id=cmd.author_id,
            )
        except ValueError as e:
            return Failure(error=invalid_input(e))

        cancellation.raise_if_cancellation_requested()
        if await self._book_repo.update(book) is None:
            return Failure(error=book_not_found(cmd.book_id))

        self._logger.info("book_updated", book_id=str(book.id))
        return Success(value=UNIT)
