"""CreateAuthor command handler.

Architecture:
- Application layer handler (orchestrates business logic)
- Imports only from domain layer (entities, protocols) and core
- Uses Result types for expected failures (validation, duplicate email)
"""

from uuid_extensions import uuid7

from src.application.commands.author_commands import CreateAuthor
from src.application.dtos.author_dtos import AuthorResult
from src.application.errors.resource_errors import email_already_exists, invalid_input
from src.application.mediator import CancellationToken
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities.author import Author
from src.domain.protocols.author_repository import AuthorRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class CreateAuthorHandler:
    """Handler for CreateAuthor command.

    Dependencies (injected via constructor):
        - AuthorRepository: For persistence and email uniqueness checks
        - LoggerProtocol: For write audit logging
    """

    def __init__(
        self,
        author_repo: AuthorRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._author_repo = author_repo
        self._logger = logger

    async def handle(
        self, cmd: CreateAuthor, cancellation: CancellationToken
    ) -> Result[AuthorResult, DomainError]:
        """Handle CreateAuthor command.

        Args:
            cmd: CreateAuthor command with name and email.
            cancellation: Caller's cancellation token.

        Returns:
            Success(AuthorResult): Author created.
            Failure(ValidationError): Name or email rejected by the entity.
            Failure(ConflictError): Email already belongs to another author.

        Raises:
            OperationCancelledError: If cancelled before storage is touched.
        """
        try:
            author = Author(id=uuid7(), name=cmd.name, email=cmd.email)
        except ValueError as e:
            return Failure(error=invalid_input(e))

        if await self._author_repo.find_by_email(author.email) is not None:
            return Failure(error=email_already_exists(author.email))

        cancellation.raise_if_cancellation_requested()
        created = await self._author_repo.create(author)

        self._logger.info("author_created", author_id=str(created.id))
        return Success(value=AuthorResult.from_entity(created))
