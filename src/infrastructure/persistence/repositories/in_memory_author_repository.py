"""In-memory implementation of the AuthorRepository protocol.

Rows live in a dict owned by the repository instance (one per process via
the container), guarded by an asyncio.Lock. Entities are copied on the way
in and on the way out so callers never hold a reference to stored state.
"""

import asyncio
from dataclasses import replace
from uuid import UUID

from src.domain.entities.author import Author


class InMemoryAuthorRepository:
    """Dict-backed author storage.

    **Implementation Notes**:
    - Insertion order is preserved (dict ordering), so list_all() is stable
    - Email lookups compare normalized (lowercase) addresses
    - Not durable: contents vanish with the process
    """

    def __init__(self) -> None:
        self._authors: dict[UUID, Author] = {}
        self._lock = asyncio.Lock()

    async def create(self, author: Author) -> Author:
        """Store a new author.

        Raises:
            ValueError: If an author with the same id is already stored.
        """
        async with self._lock:
            if author.id in self._authors:
                raise ValueError(f"Author {author.id} already exists")
            self._authors[author.id] = replace(author)
            return replace(author)

    async def get(self, author_id: UUID) -> Author | None:
        async with self._lock:
            author = self._authors.get(author_id)
            return replace(author) if author is not None else None

    async def list_all(self) -> list[Author]:
        async with self._lock:
            return [replace(author) for author in self._authors.values()]

    async def update(self, author: Author) -> Author | None:
        async with self._lock:
            if author.id not in self._authors:
                return None
            self._authors[author.id] = replace(author)
            return replace(author)

    async def delete(self, author_id: UUID) -> bool:
        async with self._lock:
            return self._authors.pop(author_id, None) is not None

    async def find_by_email(self, email: str) -> Author | None:
        normalized = email.lower()
        async with self._lock:
            for author in self._authors.values():
                if author.email == normalized:
                    return replace(author)
            return None

    async def clear(self) -> None:
        """Remove every stored author (used by tests and reseeding)."""
        async with self._lock:
            self._authors.clear()
