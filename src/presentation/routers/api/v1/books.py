"""Books resource handlers.

Handler functions for book management endpoints, dispatched through the
request-scoped Mediator. Routes are registered via ROUTE_REGISTRY in
routes/registry.py.

Handlers:
    list_books   - List all books
    get_book     - Get book details
    create_book  - Create a book for an existing author
    update_book  - Replace a book's fields
    delete_book  - Delete a book
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.book_commands import CreateBook, DeleteBook, UpdateBook
from src.application.errors import ApplicationErrorCode
from src.application.mediator import Mediator
from src.application.queries.book_queries import GetBook, ListBooks
from src.core.config import settings
from src.core.container import get_mediator
from src.core.result import Failure
from src.presentation.routers.api.middleware.correlation_middleware import (
    get_correlation_id,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.book_schemas import (
    BookCreateRequest,
    BookListResponse,
    BookResponse,
    BookUpdateRequest,
)


async def list_books(
    request: Request,
    mediator: Mediator = Depends(get_mediator),
) -> BookListResponse | JSONResponse:
    """List all books.

    GET /api/v1/books → 200 OK
    """
    result = await mediator.send(ListBooks())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error,
            request,
            get_correlation_id(),
            default_code=ApplicationErrorCode.QUERY_FAILED,
        )

    return BookListResponse.from_dto(result.value)


async def get_book(
    request: Request,
    book_id: Annotated[UUID, Path(description="Book UUID")],
    mediator: Mediator = Depends(get_mediator),
) -> BookResponse | JSONResponse:
    """Get a specific book.

    GET /api/v1/books/{book_id} → 200 OK

    Returns:
        BookResponse with book details.
        JSONResponse with RFC 9457 error on failure (404 if unknown).
    """
    result = await mediator.send(GetBook(book_id=book_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error,
            request,
            get_correlation_id(),
            default_code=ApplicationErrorCode.QUERY_FAILED,
        )

    return BookResponse.from_dto(result.value)


async def create_book(
    request: Request,
    response: Response,
    data: BookCreateRequest,
    mediator: Mediator = Depends(get_mediator),
) -> BookResponse | JSONResponse:
    """Create a new book.

    POST /api/v1/books → 201 Created (Location header set)

    Args:
        request: FastAPI request object.
        response: Response used to set the Location header.
        data: Book title, description and owning author.
        mediator: Request-scoped mediator (injected).

    Returns:
        BookResponse for the created book.
        JSONResponse with RFC 9457 error on failure (404 if author is unknown).
    """
    result = await mediator.send(
        CreateBook(
            title=data.title,
            description=data.description,
            author_id=data.author_id,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_correlation_id()
        )

    book = result.value
    response.headers["Location"] = f"{settings.api_v1_prefix}/books/{book.id}"
    return BookResponse.from_dto(book)


async def update_book(
    request: Request,
    book_id: Annotated[UUID, Path(description="Book UUID")],
    data: BookUpdateRequest,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    """Replace a book's title, description and author.

    PUT /api/v1/books/{book_id} → 204 No Content
    """
    result = await mediator.send(
        UpdateBook(
            book_id=book_id,
            title=data.title,
            description=data.description,
            author_id=data.author_id,
        )
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_correlation_id()
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def delete_book(
    request: Request,
    book_id: Annotated[UUID, Path(description="Book UUID")],
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    """Delete a book.

    DELETE /api/v1/books/{book_id} → 204 No Content
    """
    result = await mediator.send(DeleteBook(book_id=book_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_correlation_id()
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)
