"""ListAuthors query handler."""

from src.application.dtos.author_dtos import AuthorListResult
from src.application.mediator import CancellationToken
from src.application.queries.author_queries import ListAuthors
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.protocols.author_repository import AuthorRepository


class ListAuthorsHandler:
    """Handler for ListAuthors query. Never fails."""

    def __init__(self, author_repo: AuthorRepository) -> None:
        self._author_repo = author_repo

    async def handle(
        self, query: ListAuthors, cancellation: CancellationToken
    ) -> Result[AuthorListResult, DomainError]:
        authors = await self._author_repo.list_all()
        return Success(value=AuthorListResult.from_entities(authors))
