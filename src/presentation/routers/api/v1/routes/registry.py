"""API Route Registry - Single Source of Truth for all v1 routes.

ROUTE_REGISTRY is the authoritative list of all v1 endpoints. It is used to
generate FastAPI routes and their OpenAPI metadata at application startup.

Registry structure:
    - 11 endpoints across 2 resource categories (authors, books)
    - Each entry is a RouteMetadata instance with complete specification
    - Handlers reference actual functions from router modules
    - Paths are relative to the v1 prefix

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1.authors import (
    create_author,
    delete_author,
    get_author,
    list_author_books,
    list_authors,
    update_author,
)
from src.presentation.routers.api.v1.books import (
    create_book,
    delete_book,
    get_book,
    list_books,
    update_book,
)
from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas.author_schemas import AuthorListResponse, AuthorResponse
from src.schemas.book_schemas import BookListResponse, BookResponse

_VALIDATION_ERROR = ErrorSpec(status=422, description="Request validation failed")
_AUTHOR_NOT_FOUND = ErrorSpec(status=404, description="Author not found")
_BOOK_NOT_FOUND = ErrorSpec(status=404, description="Book not found")

# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Authors Resource (6 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/authors",
        handler=list_authors,
        resource="authors",
        tags=["Authors"],
        summary="List authors",
        description="Get all authors.",
        operation_id="list_authors",
        response_model=AuthorListResponse,
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/authors/{author_id}",
        handler=get_author,
        resource="authors",
        tags=["Authors"],
        summary="Get author",
        description="Get a single author by ID.",
        operation_id="get_author",
        response_model=AuthorResponse,
        status_code=200,
        errors=[_AUTHOR_NOT_FOUND, _VALIDATION_ERROR],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/authors",
        handler=create_author,
        resource="authors",
        tags=["Authors"],
        summary="Create author",
        description="Create a new author. The `Location` header points at the new resource.",
        operation_id="create_author",
        response_model=AuthorResponse,
        status_code=201,
        errors=[
            ErrorSpec(status=409, description="Email already registered"),
            _VALIDATION_ERROR,
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/authors/{author_id}",
        handler=update_author,
        resource="authors",
        tags=["Authors"],
        summary="Update author",
        description="Replace an existing author's name and email.",
        operation_id="update_author",
        response_model=None,
        status_code=204,
        errors=[
            _AUTHOR_NOT_FOUND,
            ErrorSpec(status=409, description="Email already registered"),
            _VALIDATION_ERROR,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/authors/{author_id}",
        handler=delete_author,
        resource="authors",
        tags=["Authors"],
        summary="Delete author",
        description="Delete an author. Authors who still have books cannot be deleted.",
        operation_id="delete_author",
        response_model=None,
        status_code=204,
        errors=[
            _AUTHOR_NOT_FOUND,
            ErrorSpec(status=409, description="Author still has books"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/authors/{author_id}/books",
        handler=list_author_books,
        resource="authors",
        tags=["Authors"],
        summary="List author books",
        description="Get all books written by an author.",
        operation_id="list_author_books",
        response_model=BookListResponse,
        status_code=200,
        errors=[_AUTHOR_NOT_FOUND, _VALIDATION_ERROR],
        idempotency=IdempotencyLevel.SAFE,
    ),
    # =========================================================================
    # Books Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/books",
        handler=list_books,
        resource="books",
        tags=["Books"],
        summary="List books",
        description="Get all books.",
        operation_id="list_books",
        response_model=BookListResponse,
        status_code=200,
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/books/{book_id}",
        handler=get_book,
        resource="books",
        tags=["Books"],
        summary="Get book",
        description="Get a single book by ID.",
        operation_id="get_book",
        response_model=BookResponse,
        status_code=200,
        errors=[_BOOK_NOT_FOUND, _VALIDATION_ERROR],
        idempotency=IdempotencyLevel.SAFE,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/books",
        handler=create_book,
        resource="books",
        tags=["Books"],
        summary="Create book",
        description="Create a new book for an existing author.",
        operation_id="create_book",
        response_model=BookResponse,
        status_code=201,
        errors=[_AUTHOR_NOT_FOUND, _VALIDATION_ERROR],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/books/{book_id}",
        handler=update_book,
        resource="books",
        tags=["Books"],
        summary="Update book",
        description="Replace an existing book's title, description and author.",
        operation_id="update_book",
        response_model=None,
        status_code=204,
        errors=[
            ErrorSpec(status=404, description="Book or author not found"),
            _VALIDATION_ERROR,
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/books/{book_id}",
        handler=delete_book,
        resource="books",
        tags=["Books"],
        summary="Delete book",
        description="Delete a book.",
        operation_id="delete_book",
        response_model=None,
        status_code=204,
        errors=[_BOOK_NOT_FOUND],
        idempotency=IdempotencyLevel.IDEMPOTENT,
    ),
]
