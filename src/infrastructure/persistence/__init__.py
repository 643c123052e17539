"""Persistence infrastructure.

In-memory repository implementations and demo data seeding.
"""

from src.infrastructure.persistence.repositories import (
    InMemoryAuthorRepository,
    InMemoryBookRepository,
)
from src.infrastructure.persistence.seed import seed_demo_data

__all__ = [
    "InMemoryAuthorRepository",
    "InMemoryBookRepository",
    "seed_demo_data",
]
