"""Commands (CQRS write side).

Commands are frozen dataclasses sent through the Mediator; each has exactly
one handler in commands/handlers/.
"""

from src.application.commands.author_commands import (
    CreateAuthor,
    DeleteAuthor,
    UpdateAuthor,
)
from src.application.commands.book_commands import CreateBook, DeleteBook, UpdateBook

__all__ = [
    "CreateAuthor",
    "DeleteAuthor",
    "UpdateAuthor",
    "CreateBook",
    "DeleteBook",
    "UpdateBook",
]
