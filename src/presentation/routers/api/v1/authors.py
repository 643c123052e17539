"""Authors resource handlers.

Handler functions for author management endpoints. Every handler builds a
command or query and dispatches it through the request-scoped Mediator.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    list_authors       - List all authors
    get_author         - Get author details
    create_author      - Create an author
    update_author      - Replace an author's name and email
    delete_author      - Delete an author without books
    list_author_books  - List books written by an author
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands.author_commands import (
    CreateAuthor,
    DeleteAuthor,
    UpdateAuthor,
)
from src.application.errors import ApplicationErrorCode
from src.application.mediator import Mediator
from src.application.queries.author_queries import GetAuthor, ListAuthors
from src.application.queries.book_queries import ListBooksByAuthor
from src.core.config import settings
from src.core.container import get_mediator
from src.core.result import Failure
from src.presentation.routers.api.middleware.correlation_middleware import (
    get_correlation_id,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.author_schemas import (
    AuthorCreateRequest,
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdateRequest,
)
from src.schemas.book_schemas import BookListResponse


async def list_authors(
    request: Request,
    mediator: Mediator = Depends(get_mediator),
) -> AuthorListResponse | JSONResponse:
    """List all authors.

    GET /api/v1/authors → 200 OK
    """
    result = await mediator.send(ListAuthors())

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error,
            request,
            get_correlation_id(),
            default_code=ApplicationErrorCode.QUERY_FAILED,
        )

    return AuthorListResponse.from_dto(result.value)


async def get_author(
    request: Request,
    author_id: Annotated[UUID, Path(description="Author UUID")],
    mediator: Mediator = Depends(get_mediator),
) -> AuthorResponse | JSONResponse:
    """Get a specific author.

    GET /api/v1/authors/{author_id} → 200 OK

    Args:
        request: FastAPI request object.
        author_id: Author UUID.
        mediator: Request-scoped mediator (injected).

    Returns:
        AuthorResponse with author details.
        JSONResponse with RFC 9457 error on failure.
    """
    result = await mediator.send(GetAuthor(author_id=author_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error,
            request,
            get_correlation_id(),
            default_code=ApplicationErrorCode.QUERY_FAILED,
        )

    return AuthorResponse.from_dto(result.value)


async def create_author(
    request: Request,
    response: Response,
    data: AuthorCreateRequest,
    mediator: Mediator = Depends(get_mediator),
) -> AuthorResponse | JSONResponse:
    """Create a new author.

    POST /api/v1/authors → 201 Created (Location header set)

    Args:
        request: FastAPI request object.
        response: Response used to set the Location header.
        data: Author name and email.
        mediator: Request-scoped mediator (injected).

    Returns:
        AuthorResponse for the created author.
        JSONResponse with RFC 9457 error on failure (409 if email is taken).
    """
    result = await mediator.send(CreateAuthor(name=data.name, email=data.email))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_correlation_id()
        )

    author = result.value
    response.headers["Location"] = f"{settings.api_v1_prefix}/authors/{author.id}"
    return AuthorResponse.from_dto(author)


async def update_author(
    request: Request,
    author_id: Annotated[UUID, Path(description="Author UUID")],
    data: AuthorUpdateRequest,
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    """Replace an author's name and email.

    PUT /api/v1/authors/{author_id} → 204 No Content
    """
    result = await mediator.send(
        UpdateAuthor(author_id=author_id, name=data.name, email=data.email)
    )

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_correlation_id()
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def delete_author(
    request: Request,
    author_id: Annotated[UUID, Path(description="Author UUID")],
    mediator: Mediator = Depends(get_mediator),
) -> Response:
    """Delete an author.

    DELETE /api/v1/authors/{author_id} → 204 No Content

    Authors who still have books cannot be deleted (409 Conflict).
    """
    result = await mediator.send(DeleteAuthor(author_id=author_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error, request, get_correlation_id()
        )

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def list_author_books(
    request: Request,
    author_id: Annotated[UUID, Path(description="Author UUID")],
    mediator: Mediator = Depends(get_mediator),
) -> BookListResponse | JSONResponse:
    """List books written by an author.

    GET /api/v1/authors/{author_id}/books → 200 OK
    """
    result = await mediator.send(ListBooksByAuthor(author_id=author_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(
            result.error,
            request,
            get_correlation_id(),
            default_code=ApplicationErrorCode.QUERY_FAILED,
        )

    return BookListResponse.from_dto(result.value)
