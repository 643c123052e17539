"""Demo data seeding.

Inserts two authors with one book each so a freshly started service has
something to list. Seeding is skipped when authors already exist.
"""

from uuid_extensions import uuid7

from src.domain.entities.author import Author
from src.domain.entities.book import Book
from src.domain.protocols.author_repository import AuthorRepository
from src.domain.protocols.book_repository import BookRepository
from src.domain.protocols.logger_protocol import LoggerProtocol

DEMO_AUTHORS: tuple[tuple[str, str], ...] = (
    ("John Doe", "john.doe@example.com"),
    ("Jane Smith", "jane.smith@example.com"),
)

DEMO_BOOKS: tuple[tuple[str, str], ...] = (
    ("The Great Book", "A wonderful book"),
    ("Another Great Book", "Another wonderful book"),
)


async def seed_demo_data(
    author_repo: AuthorRepository,
    book_repo: BookRepository,
    logger: LoggerProtocol | None = None,
) -> int:
    """Insert demo authors and books into empty repositories.

    The n-th demo book is written by the n-th demo author.

    Args:
        author_repo: Author storage.
        book_repo: Book storage.
        logger: Optional logger for the seeding summary.

    Returns:
        Number of authors inserted (0 if storage was not empty).
    """
    if await author_repo.list_all():
        return 0

    for (name, email), (title, description) in zip(DEMO_AUTHORS, DEMO_BOOKS):
        author = await author_repo.create(Author(id=uuid7(), name=name, email=email))
        await book_repo.create(
            Book(
                id=uuid7(),
                title=title,
                description=description,
                author_id=author.id,
            )
        )

    if logger is not None:
        logger.info(
            "demo_data_seeded",
            authors=len(DEMO_AUTHORS),
            books=len(DEMO_BOOKS),
        )
    return len(DEMO_AUTHORS)
