"""Author DTOs (Data Transfer Objects).

Result dataclasses returned by author handlers. They carry data from the
application layer to the presentation layer without exposing entities.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities.author import Author


@dataclass(frozen=True, kw_only=True)
class AuthorResult:
    """Single author result DTO.

    Attributes:
        id: Author identifier.
        name: Display name.
        email: Email address.
        created_at: Creation timestamp.
        updated_at: Last modification timestamp (None if never updated).
    """

    id: UUID
    name: str
    email: str
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_entity(cls, author: Author) -> "AuthorResult":
        return cls(
            id=author.id,
            name=author.name,
            email=author.email,
            created_at=author.created_at,
            updated_at=author.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuthorListResult:
    """List of authors.

    Attributes:
        authors: Authors in storage order.
        total_count: Number of authors returned.
    """

    authors: list[AuthorResult]
    total_count: int

    @classmethod
    def from_entities(cls, authors: list[Author]) -> "AuthorListResult":
        results = [AuthorResult.from_entity(author) for author in authors]
        return cls(authors=results, total_count=len(results))
