"""DeleteBook command handler."""

from src.application.commands.book_commands import DeleteBook
from src.application.errors.resource_errors import book_not_found
from src.application.mediator import UNIT, CancellationToken, Unit
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.book_repository import BookRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class DeleteBookHandler:
    """Handler for DeleteBook command."""

    def __init__(
        self,
        book_repo: BookRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._book_repo = book_repo
        self._logger = logger

    async def handle(
        self, cmd: DeleteBook, cancellation: CancellationToken
    ) -> Result[Unit, DomainError]:
        cancellation.raise_if_cancellation_requested()
        if not await self._book_repo.delete(cmd.book_id):
            return Failure(error=book_not_found(cmd.book_id))

        self._logger.info("book_deleted", book_id=str(cmd.book_id))
        return Success(value=UNIT)
