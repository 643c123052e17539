"""In-memory implementation of the BookRepository protocol."""

import asyncio
from dataclasses import replace
from uuid import UUID

from src.domain.entities.book import Book


class InMemoryBookRepository:
    """Dict-backed book storage guarded by an asyncio.Lock.

    Follows the same copy-in/copy-out rule as InMemoryAuthorRepository.
    """

    def __init__(self) -> None:
        self._books: dict[UUID, Book] = {}
        self._lock = asyncio.Lock()

    async def create(self, book: Book) -> Book:
        """Store a new book.

        Raises:
            ValueError: If a book with the same id is already stored.
        """
        async with self._lock:
            if book.id in self._books:
                raise ValueError(f"Book {book.id} already exists")
            self._books[book.id] = replace(book)
            return replace(book)

    async def get(self, book_id: UUID) -> Book | None:
        async with self._lock:
            book = self._books.get(book_id)
            return replace(book) if book is not None else None

    async def list_all(self) -> list[Book]:
        async with self._lock:
            return [replace(book) for book in self._books.values()]

    async def list_by_author(self, author_id: UUID) -> list[Book]:
        async with self._lock:
            return [
                replace(book)
                for book in self._books.values()
                if book.author_id == author_id
            ]

    async def update(self, book: Book) -> Book | None:
        async with self._lock:
            if book.id not in self._books:
                return None
            self._books[book.id] = replace(book)
            return replace(book)

    async def delete(self, book_id: UUID) -> bool:
        async with self._lock:
            return self._books.pop(book_id, None) is not None

    async def clear(self) -> None:
        """Remove every stored book."""
        async with self._lock:
            self._books.clear()
