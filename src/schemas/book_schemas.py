"""Book request and response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.book_dtos import BookListResult, BookResult
from src.domain.types import BookDescription, BookTitle


# =============================================================================
# Request Schemas
# =============================================================================


class BookCreateRequest(BaseModel):
    """Request schema for book creation.

    POST /api/v1/books
    Returns: 201 Created
    """

    title: BookTitle
    description: BookDescription = ""
    author_id: UUID = Field(..., description="Owning author ID")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "title": "The Great Book",
                "description": "A wonderful book",
                "author_id": "01890a5d-ac96-774b-bcce-b302099a8057",
            }
        },
    )


class BookUpdateRequest(BaseModel):
    """Request schema for book replacement.

    PUT /api/v1/books/{book_id}
    Returns: 204 No Content
    """

    title: BookTitle
    description: BookDescription = ""
    author_id: UUID = Field(..., description="Owning author ID")

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Response Schemas
# =============================================================================


class BookResponse(BaseModel):
    """Single book response."""

    id: UUID = Field(..., description="Book unique identifier")
    title: str = Field(..., description="Book title", examples=["The Great Book"])
    description: str = Field(
        ..., description="Book description", examples=["A wonderful book"]
    )
    author_id: UUID = Field(..., description="Owning author ID")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: BookResult) -> "BookResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            author_id=dto.author_id,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class BookListResponse(BaseModel):
    """Book list response."""

    books: list[BookResponse] = Field(..., description="List of books")
    total_count: int = Field(..., description="Total book count")

    @classmethod
    def from_dto(cls, dto: BookListResult) -> "BookListResponse":
        return cls(
            books=[BookResponse.from_dto(book) for book in dto.books],
            total_count=dto.total_count,
        )
