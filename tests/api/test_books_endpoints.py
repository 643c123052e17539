"""API tests for /api/v1/books."""

from uuid import uuid4

import pytest

from src.core.config import settings

BOOKS = "/api/v1/books"


@pytest.fixture
def seeded_book(client) -> dict:
    books = client.get(BOOKS).json()["books"]
    return next(b for b in books if b["title"] == "The Great Book")


@pytest.mark.api
class TestReadBooks:
    def test_list_returns_seeded_books(self, client):
        response = client.get(BOOKS)

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 2
        assert {b["title"] for b in body["books"]} == {
            "The Great Book",
            "Another Great Book",
        }

    def test_get_by_id(self, client, seeded_book, seeded_author):
        response = client.get(f"{BOOKS}/{seeded_book['id']}")

        assert response.status_code == 200
        assert response.json()["author_id"] == seeded_author["id"]

    def test_get_missing_book(self, client):
        missing_id = uuid4()

        response = client.get(f"{BOOKS}/{missing_id}")

        assert response.status_code == 404
        body = response.json()
        assert body["detail"] == f"Book with ID {missing_id} not found"
        assert body["correlation_id"] == response.headers["Correlation-Id"]


@pytest.mark.api
class TestWriteBooks:
    def test_create_returns_201_with_location(self, client, seeded_author):
        response = client.post(
            BOOKS,
            json={
                "title": "A Sequel",
                "description": "More of the same",
                "author_id": seeded_author["id"],
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert response.headers["Location"] == f"{settings.api_v1_prefix}/books/{body['id']}"
        assert body["author_id"] == seeded_author["id"]

        listed = client.get(f"/api/v1/authors/{seeded_author['id']}/books").json()
        assert listed["total_count"] == 2

    def test_create_description_defaults_to_empty(self, client, seeded_author):
        response = client.post(
            BOOKS, json={"title": "Untold", "author_id": seeded_author["id"]}
        )

        assert response.status_code == 201
        assert response.json()["description"] == ""

    def test_create_for_unknown_author(self, client):
        missing_author = uuid4()

        response = client.post(
            BOOKS, json={"title": "Orphan", "author_id": str(missing_author)}
        )

        assert response.status_code == 404
        assert response.json()["detail"] == f"Author with ID {missing_author} not found"

    @pytest.mark.parametrize(
        ("payload_update", "field"),
        [
            ({"title": ""}, "title"),
            ({"title": "T" * 201}, "title"),
            ({"description": "D" * 2001}, "description"),
            ({"author_id": "nope"}, "author_id"),
        ],
    )
    def test_create_invalid_payload(self, client, seeded_author, payload_update, field):
        payload = {"title": "Valid", "author_id": seeded_author["id"]} | payload_update

        response = client.post(BOOKS, json=payload)

        assert response.status_code == 422
        assert field in {error["field"] for error in response.json()["errors"]}

    def test_update_returns_204(self, client, seeded_book):
        url = f"{BOOKS}/{seeded_book['id']}"

        response = client.put(
            url,
            json={
                "title": "The Greatest Book",
                "description": "Revised",
                "author_id": seeded_book["author_id"],
            },
        )

        assert response.status_code == 204
        updated = client.get(url).json()
        assert updated["title"] == "The Greatest Book"
        assert updated["updated_at"] is not None

    def test_update_can_move_book_to_other_author(self, client, seeded_book):
        authors = client.get("/api/v1/authors").json()["authors"]
        other = next(a for a in authors if a["id"] != seeded_book["author_id"])

        response = client.put(
            f"{BOOKS}/{seeded_book['id']}",
            json={"title": seeded_book["title"], "author_id": other["id"]},
        )

        assert response.status_code == 204
        moved = client.get(f"/api/v1/authors/{other['id']}/books").json()
        assert seeded_book["id"] in {b["id"] for b in moved["books"]}

    def test_update_to_unknown_author(self, client, seeded_book):
        response = client.put(
            f"{BOOKS}/{seeded_book['id']}",
            json={"title": "Lost", "author_id": str(uuid4())},
        )

        assert response.status_code == 404

    def test_update_missing_book(self, client, seeded_author):
        response = client.put(
            f"{BOOKS}/{uuid4()}",
            json={"title": "Ghost", "author_id": seeded_author["id"]},
        )

        assert response.status_code == 404

    def test_delete(self, client, seeded_book):
        url = f"{BOOKS}/{seeded_book['id']}"

        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404
        assert client.delete(url).status_code == 404
