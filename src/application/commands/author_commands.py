"""Author commands (CQRS write operations).

Commands represent intent to change author state. All commands are
immutable (frozen=True), use keyword-only arguments (kw_only=True) and
declare their handler's response type through their Request[...] base.

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types; expected failures are DomainError values
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.dtos.author_dtos import AuthorResult
from src.application.mediator import Request, Unit
from src.core.errors import DomainError
from src.core.result import Result


@dataclass(frozen=True, kw_only=True)
class CreateAuthor(Request[Result[AuthorResult, DomainError]]):
    """Create a new author.

    Attributes:
        name: Display name.
        email: Email address (must not belong to another author).

    Example:
        >>> command = CreateAuthor(name="John Doe", email="john.doe@example.com")
        >>> result = await mediator.send(command)
    """

    name: str
    email: str


@dataclass(frozen=True, kw_only=True)
class UpdateAuthor(Request[Result[Unit, DomainError]]):
    """Replace an existing author's name and email.

    Attributes:
        author_id: Author to update.
        name: New display name.
        email: New email address (must not belong to another author).
    """

    author_id: UUID
    name: str
    email: str


@dataclass(frozen=True, kw_only=True)
class DeleteAuthor(Request[Result[Unit, DomainError]]):
    """Delete an author who has no books.

    Attributes:
        author_id: Author to delete.
    """

    author_id: UUID
