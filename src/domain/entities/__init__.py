"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.author import Author
from src.domain.entities.book import Book

__all__ = [
    "Author",
    "Book",
]
