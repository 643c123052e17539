"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import AuthorRepository, BookRepository
"""

from src.domain.protocols.author_repository import AuthorRepository
from src.domain.protocols.book_repository import BookRepository
from src.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AuthorRepository",
    "BookRepository",
    "LoggerProtocol",
]
