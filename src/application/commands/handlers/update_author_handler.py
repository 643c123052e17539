"""UpdateAuthor command handler."""

from src.application.commands.author_commands import UpdateAuthor
from src.application.errors.resource_errors import (
    author_not_found,
    email_already_exists,
    invalid_input,
)
from src.application.mediator import UNIT, CancellationToken, Unit
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.author_repository import AuthorRepository
from src.domain.protocols.logger_protocol import LoggerProtocol


class UpdateAuthorHandler:
    """Handler for UpdateAuthor command.

    Replaces name and email. The email may stay the same; it may not match
    a different author's email.
    """

    def __init__(
        self,
        author_repo: AuthorRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._author_repo = author_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateAuthor, cancellation: CancellationToken
    ) -> Result[Unit, DomainError]:
        """Handle UpdateAuthor command.

        Returns:
            Success(UNIT): Author updated.
            Failure(NotFoundError): Author does not exist.
            Failure(ValidationError): Name or email rejected by the entity.
            Failure(ConflictError): Email belongs to another author.
        """
        author = await self._author_repo.get(cmd.author_id)
        if author is None:
            return Failure(error=author_not_found(cmd.author_id))

        try:
            author.apply_update(name=cmd.name, email=cmd.email)
        except ValueError as e:
            return Failure(error=invalid_input(e))

        owner = await self._author_repo.find_by_email(author.email)
        if owner is not None and owner.id != author.id:
            return Failure(error=email_already_exists(author.email))

        cancellation.raise_if_cancellation_requested()
        if await self._author_repo.update(author) is None:
            # Deleted between read and write
            return Failure(error=author_not_found(cmd.author_id))

        self._logger.info("author_updated", author_id=str(author.id))
        return Success(value=UNIT)
