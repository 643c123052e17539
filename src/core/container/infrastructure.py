"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Author and book storage (in-memory repositories)

Every factory is wrapped in lru_cache so the whole process shares one
instance. Tests reset state with ``get_author_repository.cache_clear()``.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import settings

if TYPE_CHECKING:
    from src.domain.protocols.author_repository import AuthorRepository
    from src.domain.protocols.book_repository import BookRepository
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable, colored)
    - testing/ci/production: ConsoleAdapter (JSON)

    Minimum level comes from ``settings.log_level``.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_author_repository() -> "AuthorRepository":
    """Get author storage singleton (app-scoped).

    Returns:
        In-memory implementation of AuthorRepository.

    Usage:
        # Application Layer (handlers receive it via auto-wiring)
        repo = get_author_repository()
        author = await repo.get(author_id)
    """
    from src.infrastructure.persistence.repositories import InMemoryAuthorRepository

    return InMemoryAuthorRepository()


@lru_cache()
def get_book_repository() -> "BookRepository":
    """Get book storage singleton (app-scoped)."""
    from src.infrastructure.persistence.repositories import InMemoryBookRepository

    return InMemoryBookRepository()
