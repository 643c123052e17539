"""CQRS Registry - Single Source of Truth for Commands and Queries.

This registry catalogs ALL commands and queries in the system with their metadata.
Used for:
- Handler container registration at startup (one handler per request type)
- Validation tests (verify no drift between commands/handlers)

Adding new commands/queries:
1. Define command/query dataclass in appropriate *_commands.py/*_queries.py file
2. Create handler class in handlers/ directory
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing
"""

from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all commands
# ═══════════════════════════════════════════════════════════════════════════
from src.application.commands.author_commands import (
    CreateAuthor,
    DeleteAuthor,
    UpdateAuthor,
)
from src.application.commands.book_commands import CreateBook, DeleteBook, UpdateBook

# ═══════════════════════════════════════════════════════════════════════════
# Import all queries
# ═══════════════════════════════════════════════════════════════════════════
from src.application.queries.author_queries import GetAuthor, ListAuthors
from src.application.queries.book_queries import GetBook, ListBooks, ListBooksByAuthor

# ═══════════════════════════════════════════════════════════════════════════
# Import all handlers
# ═══════════════════════════════════════════════════════════════════════════
from src.application.commands.handlers.create_author_handler import (
    CreateAuthorHandler,
)
from src.application.commands.handlers.create_book_handler import CreateBookHandler
from src.application.commands.handlers.delete_author_handler import (
    DeleteAuthorHandler,
)
from src.application.commands.handlers.delete_book_handler import DeleteBookHandler
from src.application.commands.handlers.update_author_handler import (
    UpdateAuthorHandler,
)
from src.application.commands.handlers.update_book_handler import UpdateBookHandler
from src.application.queries.handlers.get_author_handler import GetAuthorHandler
from src.application.queries.handlers.get_book_handler import GetBookHandler
from src.application.queries.handlers.list_authors_handler import ListAuthorsHandler
from src.application.queries.handlers.list_books_handler import (
    ListBooksByAuthorHandler,
    ListBooksHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import result DTOs
# ═══════════════════════════════════════════════════════════════════════════
from src.application.dtos.author_dtos import AuthorListResult, AuthorResult
from src.application.dtos.book_dtos import BookListResult, BookResult


# ═══════════════════════════════════════════════════════════════════════════
# COMMAND REGISTRY
# ═══════════════════════════════════════════════════════════════════════════

COMMAND_REGISTRY: list[CommandMetadata] = [
    # ───────────────────────────────────────────────────────────────────────
    # Authors
    # ───────────────────────────────────────────────────────────────────────
    CommandMetadata(
        command_class=CreateAuthor,
        handler_class=CreateAuthorHandler,
        category=CQRSCategory.AUTHORS,
        has_result_dto=True,
        result_dto_class=AuthorResult,
        description="Create a new author with a unique email",
    ),
    CommandMetadata(
        command_class=UpdateAuthor,
        handler_class=UpdateAuthorHandler,
        category=CQRSCategory.AUTHORS,
        description="Replace an author's name and email",
    ),
    CommandMetadata(
        command_class=DeleteAuthor,
        handler_class=DeleteAuthorHandler,
        category=CQRSCategory.AUTHORS,
        description="Delete an author who has no books",
    ),
    # ───────────────────────────────────────────────────────────────────────
    # Books
    # ───────────────────────────────────────────────────────────────────────
    CommandMetadata(
        command_class=CreateBook,
        handler_class=CreateBookHandler,
        category=CQRSCategory.BOOKS,
        has_result_dto=True,
        result_dto_class=BookResult,
        description="Create a book for an existing author",
    ),
    CommandMetadata(
        command_class=UpdateBook,
        handler_class=UpdateBookHandler,
        category=CQRSCategory.BOOKS,
        description="Replace a book's title, description and author",
    ),
    CommandMetadata(
        command_class=DeleteBook,
        handler_class=DeleteBookHandler,
        category=CQRSCategory.BOOKS,
        description="Delete a book",
    ),
]


# ═══════════════════════════════════════════════════════════════════════════
# QUERY REGISTRY
# ═══════════════════════════════════════════════════════════════════════════

QUERY_REGISTRY: list[QueryMetadata] = [
    # ───────────────────────────────────────────────────────────────────────
    # Authors
    # ───────────────────────────────────────────────────────────────────────
    QueryMetadata(
        query_class=GetAuthor,
        handler_class=GetAuthorHandler,
        category=CQRSCategory.AUTHORS,
        result_dto_class=AuthorResult,
        description="Get a single author by ID",
    ),
    QueryMetadata(
        query_class=ListAuthors,
        handler_class=ListAuthorsHandler,
        category=CQRSCategory.AUTHORS,
        result_dto_class=AuthorListResult,
        returns_list=True,
        description="List all authors",
    ),
    # ───────────────────────────────────────────────────────────────────────
    # Books
    # ───────────────────────────────────────────────────────────────────────
    QueryMetadata(
        query_class=GetBook,
        handler_class=GetBookHandler,
        category=CQRSCategory.BOOKS,
        result_dto_class=BookResult,
        description="Get a single book by ID",
    ),
    QueryMetadata(
        query_class=ListBooks,
        handler_class=ListBooksHandler,
        category=CQRSCategory.BOOKS,
        result_dto_class=BookListResult,
        returns_list=True,
        description="List all books",
    ),
    QueryMetadata(
        query_class=ListBooksByAuthor,
        handler_class=ListBooksByAuthorHandler,
        category=CQRSCategory.BOOKS,
        result_dto_class=BookListResult,
        returns_list=True,
        description="List the books of one author",
    ),
]
