"""GetAuthor query handler.

Returns DTO (not domain entity) to prevent leaking domain to presentation.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[DTO, DomainError] (explicit error handling)
- Side-effect free
"""

from src.application.dtos.author_dtos import AuthorResult
from src.application.errors.resource_errors import author_not_found
from src.application.mediator import CancellationToken
from src.application.queries.author_queries import GetAuthor
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.protocols.author_repository import AuthorRepository


class GetAuthorHandler:
    """Handler for GetAuthor query.

    Dependencies (injected via constructor):
        - AuthorRepository: For data retrieval
    """

    def __init__(self, author_repo: AuthorRepository) -> None:
        self._author_repo = author_repo

    async def handle(
        self, query: GetAuthor, cancellation: CancellationToken
    ) -> Result[AuthorResult, DomainError]:
        """Handle GetAuthor query.

        Returns:
            Success(AuthorResult): Author found.
            Failure(NotFoundError): Author does not exist.
        """
        author = await self._author_repo.get(query.author_id)
        if author is None:
            return Failure(error=author_not_found(query.author_id))

        return Success(value=AuthorResult.from_entity(author))
