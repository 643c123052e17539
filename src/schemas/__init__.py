"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import AuthorCreateRequest, BookResponse
"""

from src.schemas.author_schemas import (
    AuthorCreateRequest,
    AuthorListResponse,
    AuthorResponse,
    AuthorUpdateRequest,
)
from src.schemas.book_schemas import (
    BookCreateRequest,
    BookListResponse,
    BookResponse,
    BookUpdateRequest,
)

__all__ = [
    # Authors
    "AuthorCreateRequest",
    "AuthorUpdateRequest",
    "AuthorResponse",
    "AuthorListResponse",
    # Books
    "BookCreateRequest",
    "BookUpdateRequest",
    "BookResponse",
    "BookListResponse",
]
