"""Author queries (CQRS read operations).

Queries represent requests for data. They never change state.
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.dtos.author_dtos import AuthorListResult, AuthorResult
from src.application.mediator import Request
from src.core.errors import DomainError
from src.core.result import Result


@dataclass(frozen=True, kw_only=True)
class GetAuthor(Request[Result[AuthorResult, DomainError]]):
    """Get a single author by ID.

    Attributes:
        author_id: Author to retrieve.

    Example:
        >>> result = await mediator.send(GetAuthor(author_id=author_id))
        >>> match result:
        ...     case Success(value=author):
        ...         print(author.name)
    """

    author_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListAuthors(Request[Result[AuthorListResult, DomainError]]):
    """List every author."""
