"""Author request and response schemas.

Pydantic schemas for author API endpoints. Includes:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.application.dtos.author_dtos import AuthorListResult, AuthorResult
from src.domain.types import AuthorName, Email


# =============================================================================
# Request Schemas
# =============================================================================


class AuthorCreateRequest(BaseModel):
    """Request schema for author creation.

    POST /api/v1/authors
    Returns: 201 Created
    """

    name: AuthorName
    email: Email

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "John Doe",
                "email": "john.doe@example.com",
            }
        },
    )


class AuthorUpdateRequest(BaseModel):
    """Request schema for author replacement.

    PUT /api/v1/authors/{author_id}
    Returns: 204 No Content
    """

    name: AuthorName
    email: Email

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "example": {
                "name": "Jane Smith",
                "email": "jane.smith@example.com",
            }
        },
    )


# =============================================================================
# Response Schemas
# =============================================================================


class AuthorResponse(BaseModel):
    """Single author response."""

    id: UUID = Field(..., description="Author unique identifier")
    name: str = Field(..., description="Author name", examples=["John Doe"])
    email: str = Field(
        ..., description="Author email address", examples=["john.doe@example.com"]
    )
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    @classmethod
    def from_dto(cls, dto: AuthorResult) -> "AuthorResponse":
        """Convert application DTO to response schema.

        Args:
            dto: AuthorResult from handler.

        Returns:
            AuthorResponse for API response.
        """
        return cls(
            id=dto.id,
            name=dto.name,
            email=dto.email,
            created_at=dto.created_at,
            updated_at=dto.updated_at,
        )


class AuthorListResponse(BaseModel):
    """Author list response.

    Attributes:
        authors: List of authors.
        total_count: Number of authors.
    """

    authors: list[AuthorResponse] = Field(..., description="List of authors")
    total_count: int = Field(..., description="Total author count")

    @classmethod
    def from_dto(cls, dto: AuthorListResult) -> "AuthorListResponse":
        return cls(
            authors=[AuthorResponse.from_dto(author) for author in dto.authors],
            total_count=dto.total_count,
        )
