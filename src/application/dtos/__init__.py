"""Application DTOs (handler result types).

DTOs:
    - AuthorResult, AuthorListResult
    - BookResult, BookListResult
"""

from src.application.dtos.author_dtos import AuthorListResult, AuthorResult
from src.application.dtos.book_dtos import BookListResult, BookResult

__all__ = [
    "AuthorListResult",
    "AuthorResult",
    "BookListResult",
    "BookResult",
]
