"""CQRS Metadata Types.

Dataclasses and enums for CQRS registry metadata.

Design Principles:
- Immutable (frozen=True) - registry entries never change at runtime
- Type-safe (kw_only=True) - explicit field assignment
- Self-documenting - clear field names and docstrings
"""

from dataclasses import dataclass
from enum import Enum


class CQRSCategory(str, Enum):
    """Categories for CQRS commands and queries (one per resource)."""

    AUTHORS = "authors"
    BOOKS = "books"


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Metadata for a command in the CQRS registry.

    Attributes:
        command_class: The command dataclass (e.g., CreateAuthor).
        handler_class: The handler class (e.g., CreateAuthorHandler).
        category: Resource the command changes.
        has_result_dto: Whether handler returns a result DTO (vs Unit).
        result_dto_class: The DTO class if has_result_dto is True.
        description: Human-readable description for documentation.

    Example:
        >>> CommandMetadata(
        ...     command_class=CreateAuthor,
        ...     handler_class=CreateAuthorHandler,
        ...     category=CQRSCategory.AUTHORS,
        ...     has_result_dto=True,
        ...     result_dto_class=AuthorResult,
        ...     description="Create a new author",
        ... )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    has_result_dto: bool = False
    result_dto_class: type | None = None
    description: str = ""

    def __post_init__(self) -> None:
        """Validate metadata consistency."""
        if self.has_result_dto and self.result_dto_class is None:
            raise ValueError(
                f"Command {self.command_class.__name__} has has_result_dto=True "
                f"but no result_dto_class specified"
            )
        if not self.has_result_dto and self.result_dto_class is not None:
            raise ValueError(
                f"Command {self.command_class.__name__} has result_dto_class "
                f"but has_result_dto=False"
            )


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Metadata for a query in the CQRS registry.

    Attributes:
        query_class: The query dataclass (e.g., GetAuthor).
        handler_class: The handler class (e.g., GetAuthorHandler).
        category: Resource the query reads.
        result_dto_class: DTO carried by Success.
        returns_list: Whether the DTO is a list result.
        description: Human-readable description for documentation.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    result_dto_class: type
    returns_list: bool = False
    description: str = ""
