"""DeleteAuthor command handler.

Authors that still own books are not deleted: the handler returns a
ConflictError instead of cascading or leaving orphaned books.
"""

from src.application.commands.author_commands import DeleteAuthor
from src.application.errors.resource_errors import author_has_books, author_not_found
from src.application.mediator import UNIT, CancellationToken, Unit
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.author_repository import AuthorRepository
from src.domain.protocols.book_repository import BookRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class DeleteAuthorHandler:
    """Handler for DeleteAuthor command.

    Dependencies (injected via constructor):
        - AuthorRepository: For persistence
        - BookRepository: For the "author has books" check
        - LoggerProtocol: For write audit logging
    """

    def __init__(
        self,
        author_repo: AuthorRepository,
        book_repo: BookRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._author_repo = author_repo
        self._book_repo = book_repo
        self._logger = logger

    async def handle(
        self, cmd: DeleteAuthor, cancellation: CancellationToken
    ) -> Result[Unit, DomainError]:
        """Handle DeleteAuthor command.

        Returns:
            Success(UNIT): Author deleted.
            Failure(NotFoundError): Author does not exist.
            Failure(ConflictError): Author still has books.
        """
        if await self._author_repo.get(cmd.author_id) is None:
            return Failure(error=author_not_found(cmd.author_id))

        books = await self._book_repo.list_by_author(cmd.author_id)
        if books:
            return Failure(error=author_has_books(cmd.author_id, len(books)))

        cancellation.raise_if_cancellation_requested()
        if not await self._author_repo.delete(cmd.author_id):
            return Failure(error=author_not_found(cmd.author_id))

        self._logger.info("author_deleted", author_id=str(cmd.author_id))
        return Success(value=UNIT)
