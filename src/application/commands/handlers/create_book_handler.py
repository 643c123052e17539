"""CreateBook command handler."""

from uuid_extensions import uuid7

from src.application.commands.book_commands import CreateBook
from src.application.dtos.book_dtos import BookResult
from src.application.errors.resource_errors import author_not_found, invalid_input
from src.application.mediator import CancellationToken
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.book import Book
from src.domain.protocols.author_repository import AuthorRepository
from src.domain.protocols.book_repository import BookRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class CreateBookHandler:
    """Handler for CreateBook command.

    Books may only be created for authors that exist.
    """

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
        self, cmd: CreateBook, cancellation: CancellationToken
    ) -> Result[BookResult, DomainError]:
        """Handle CreateBook command.

        Returns:
            Success(BookResult): Book created.
            Failure(ValidationError): Title or description rejected.
            Failure(NotFoundError): Author does not exist.
        """
        try:
            book = Book(
                id=uuid7(),
                title=cmd.title,
                description=cmd.description,
                author_id=cmd.author_id,
            )
        except ValueError as e:
            return Failure(error=invalid_input(e))

        if await self._author_repo.get(cmd.author_id) is None:
            return Failure(error=author_not_found(cmd.author_id))

        cancellation.raise_if_cancellation_requested()
        created = await self._book_repo.create(book)

        self._logger.info(
            "book_created",
            book_id=str(created.id),
            author_id=str(created.author_id),
        )
        return Success(value=BookResult.from_entity(created))
