"""Result types for railway-oriented programming.

Handlers return expected failures (author not found, duplicate email) as
data instead of raising, so endpoints can map them to HTTP responses
explicitly. Unexpected failures still raise and propagate.

Usage:
    async def handle(self, query: GetBook, cancellation) -> Result[BookResult, DomainError]:
        book = await self._books.get(query.book_id)
        if book is None:
            return Failure(error=book_not_found(query.book_id))
        return Success(value=BookResult.from_entity(book))

    match await mediator.send(GetBook(book_id=book_id)):
        case Success(value=book):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying the produced value.

    Attributes:
        value: The value produced by the operation.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying the error.

    Attributes:
        error: Error describing why the operation failed.
    """

    error: E


# Either branch of an operation outcome
type Result[T, E] = Success[T] | Failure[E]
