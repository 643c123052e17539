"""Queries (CQRS read side)."""

from src.application.queries.author_queries import GetAuthor, ListAuthors
from src.application.queries.book_queries import GetBook, ListBooks, ListBooksByAuthor

__all__ = [
    "GetAuthor",
    "ListAuthors",
    "GetBook",
    "ListBooks",
    "ListBooksByAuthor",
]
