"""Author repository protocol.

Defines the interface for author persistence operations. Replaces the
module-level demo lists of earlier revisions: storage is owned by an
injected repository instance.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.author import Author


class AuthorRepository(Protocol):
    """Protocol for author persistence operations.

    Infrastructure layer provides concrete implementations (in-memory for
    this service).

    **Design Principles**:
    - Methods accept and return domain entities (Author)
    - Returned entities are copies; mutating them does not change storage
    - Missing rows are reported as None/False, never as exceptions
    """

    async def create(self, author: Author) -> Author:
        """Store a new author.

        Args:
            author: Author entity with a fresh id.

        Returns:
            The stored author.
        """
        ...

    async def get(self, author_id: UUID) -> Author | None:
        """Find author by ID.

        Returns:
            Author entity if found, None otherwise.
        """
        ...

    async def list_all(self) -> list[Author]:
        """List all authors in insertion order."""
        ...

    async def update(self, author: Author) -> Author | None:
        """Replace a stored author.

        Args:
            author: Author entity carrying the id of the row to replace.

        Returns:
            The stored author, or None if no author has that id.
        """
        ...

    async def delete(self, author_id: UUID) -> bool:
        """Delete author by ID.

        Returns:
            True if an author was removed, False if none existed.
        """
        ...

    async def find_by_email(self, email: str) -> Author | None:
        """Find author by (normalized) email address.

        Example:
            >>> author = await repo.find_by_email("john.doe@example.com")
        """
        ...
