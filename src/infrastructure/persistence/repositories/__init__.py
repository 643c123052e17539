"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.in_memory_author_repository import (
    InMemoryAuthorRepository,
)
from src.infrastructure.persistence.repositories.in_memory_book_repository import (
    InMemoryBookRepository,
)

__all__ = [
    "InMemoryAuthorRepository",
    "InMemoryBookRepository",
]
