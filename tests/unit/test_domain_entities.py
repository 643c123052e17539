"""Unit tests for Author and Book entities.

Tests cover:
- Field normalization in __post_init__
- Validation failures raised as ValueError
- apply_update() replacing fields and stamping updated_at
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from src.domain.entities.author import Author
from src.domain.entities.book import Book


@pytest.mark.unit
class TestAuthor:
    def test_normalizes_name_and_email(self):
        author = Author(id=uuid7(), name="  John Doe  ", email="John.Doe@Example.COM")

        assert author.name == "John Doe"
        assert author.email == "john.doe@example.com"
        assert author.created_at.tzinfo == UTC
        assert author.updated_at is None

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError, match="Name cannot be empty"):
            Author(id=uuid7(), name="", email="john.doe@example.com")

    def test_invalid_email_rejected(self):
        with pytest.raises(ValueError, match="Invalid email format"):
            Author(id=uuid7(), name="John", email="john-at-example")

    def test_apply_update_sets_updated_at(self):
        author = Author(id=uuid7(), name="John Doe", email="john.doe@example.com")

        author.apply_update(name="Johnny", email="JOHNNY@example.com")

        assert author.name == "Johnny"
        assert author.email == "johnny@example.com"
        assert isinstance(author.updated_at, datetime)

    def test_apply_update_with_invalid_name_raises(self):
        author = Author(id=uuid7(), name="John Doe", email="john.doe@example.com")

        with pytest.raises(ValueError):
            author.apply_update(name="x" * 101, email="john.doe@example.com")


@pytest.mark.unit
class TestBook:
    def test_strips_title_and_keeps_description(self):
        book = Book(
            id=uuid7(), title=" The Great Book ", description="", author_id=uuid7()
        )

        assert book.title == "The Great Book"
        assert book.description == ""

    def test_blank_title_rejected(self):
        with pytest.raises(ValueError, match="Title cannot be empty"):
            Book(id=uuid7(), title="  ", description="", author_id=uuid7())

    def test_long_description_rejected(self):
        with pytest.raises(ValueError, match="Description cannot exceed"):
            Book(id=uuid7(), title="T", description="d" * 2001, author_id=uuid7())

    def test_apply_update_moves_book_to_new_author(self):
        book = Book(id=uuid7(), title="T", description="", author_id=uuid7())
        new_author_id = uuid7()

        book.apply_update(title="T2", description="D2", author_id=new_author_id)

        assert book.author_id == new_author_id
        assert book.title == "T2"
        assert book.updated_at is not None
