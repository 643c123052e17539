"""API tests for /api/v1/authors.

Runs through the full stack: middleware, generated routes, mediator,
handlers and in-memory repositories (seeded with the demo data).
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from src.application.mediator import Mediator
from src.core.config import settings
from src.core.container import get_mediator
from src.main import app

AUTHORS = "/api/v1/authors"
CORRELATION_ID = "6f1c2f1e-7a53-4e3a-9d57-1f0e0c2b7d11"


@pytest.mark.api
class TestReadAuthors:
    def test_list_returns_seeded_authors(self, client):
        response = client.get(AUTHORS)

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 2
        assert {a["email"] for a in body["authors"]} == {
            "john.doe@example.com",
            "jane.smith@example.com",
        }

    def test_get_by_id(self, client, seeded_author):
        response = client.get(f"{AUTHORS}/{seeded_author['id']}")

        assert response.status_code == 200
        assert response.json() == seeded_author

    def test_get_missing_author_is_problem_details(self, client):
        missing_id = uuid4()

        response = client.get(
            f"{AUTHORS}/{missing_id}", headers={"Correlation-Id": str(missing_id)}
        )

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        body = response.json()
        assert body["type"] == f"{settings.api_base_url}/errors/not_found"
        assert body["title"] == "Resource Not Found"
        assert body["detail"] == f"Author with ID {missing_id} not found"
        assert body["instance"] == f"{AUTHORS}/{missing_id}"
        assert body["correlation_id"] == str(missing_id)

    def test_malformed_id_is_validation_error(self, client):
        response = client.get(f"{AUTHORS}/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "path.author_id"

    def test_books_of_author(self, client, seeded_author):
        response = client.get(f"{AUTHORS}/{seeded_author['id']}/books")

        assert response.status_code == 200
        body = response.json()
        assert body["total_count"] == 1
        assert body["books"][0]["title"] == "The Great Book"

    def test_books_of_missing_author(self, client):
        response = client.get(f"{AUTHORS}/{uuid4()}/books")

        assert response.status_code == 404


@pytest.mark.api
class TestWriteAuthors:
    def test_create_returns_201_with_location(self, client):
        response = client.post(
            AUTHORS, json={"name": "Ada Palmer", "email": "Ada@Example.com"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["email"] == "ada@example.com"
        assert body["updated_at"] is None
        assert response.headers["Location"] == f"{AUTHORS}/{body['id']}"
        assert client.get(response.headers["Location"]).status_code == 200

    def test_create_duplicate_email_conflicts(self, client):
        response = client.post(
            AUTHORS, json={"name": "John Again", "email": "john.doe@example.com"}
        )

        assert response.status_code == 409
        body = response.json()
        assert body["title"] == "Resource Conflict"
        assert body["errors"][0]["field"] == "email"
        assert body["errors"][0]["code"] == "email_already_exists"

    @pytest.mark.parametrize(
        ("payload", "field"),
        [
            ({"name": "", "email": "x@example.com"}, "name"),
            ({"name": "N" * 101, "email": "x@example.com"}, "name"),
            ({"name": "Valid", "email": "not-an-email"}, "email"),
            ({"email": "x@example.com"}, "name"),
        ],
    )
    def test_create_invalid_payload(self, client, payload, field):
        response = client.post(AUTHORS, json=payload)

        assert response.status_code == 422
        body = response.json()
        assert body["title"] == "Validation Failed"
        assert field in {error["field"] for error in body["errors"]}

    def test_update_returns_204(self, client, seeded_author):
        url = f"{AUTHORS}/{seeded_author['id']}"

        response = client.put(
            url, json={"name": "Johnathan Doe", "email": "john.doe@example.com"}
        )

        assert response.status_code == 204
        assert response.content == b""
        updated = client.get(url).json()
        assert updated["name"] == "Johnathan Doe"
        assert updated["updated_at"] is not None

    def test_update_to_taken_email_conflicts(self, client, seeded_author):
        response = client.put(
            f"{AUTHORS}/{seeded_author['id']}",
            json={"name": "John Doe", "email": "jane.smith@example.com"},
        )

        assert response.status_code == 409

    def test_update_missing_author(self, client):
        response = client.put(
            f"{AUTHORS}/{uuid4()}", json={"name": "Ghost", "email": "g@example.com"}
        )

        assert response.status_code == 404

    def test_delete_author_with_books_conflicts(self, client, seeded_author):
        response = client.delete(f"{AUTHORS}/{seeded_author['id']}")

        assert response.status_code == 409
        body = response.json()
        assert body["errors"][0]["field"] == "books"

    def test_delete_author_without_books(self, client):
        created = client.post(
            AUTHORS, json={"name": "Short Lived", "email": "short@example.com"}
        ).json()

        response = client.delete(f"{AUTHORS}/{created['id']}")

        assert response.status_code == 204
        assert client.get(f"{AUTHORS}/{created['id']}").status_code == 404
        assert client.delete(f"{AUTHORS}/{created['id']}").status_code == 404


@pytest.mark.api
class TestCorrelationAndFailures:
    def test_correlation_id_echoed(self, client):
        correlation_id = str(uuid4())

        response = client.get(AUTHORS, headers={"Correlation-Id": correlation_id})

        assert response.headers["Correlation-Id"] == correlation_id

    def test_correlation_id_generated(self, client):
        response = client.get(AUTHORS)

        assert response.headers["Correlation-Id"]

    @pytest.mark.parametrize(
        "authorization", ["Bearer not-a-real-token", "Basic dXNlcjpwYXNz", "garbage"]
    )
    def test_authorization_header_is_not_enforced(self, client, authorization):
        response = client.get(AUTHORS, headers={"Authorization": authorization})

        assert response.status_code == 200

    def test_non_uuid_correlation_header_rejected(self, client):
        response = client.get(AUTHORS, headers={"Correlation-Id": "not-a-uuid"})

        assert response.status_code == 422
        assert response.headers["Correlation-Id"] != "not-a-uuid"
        assert response.json()["correlation_id"] == response.headers["Correlation-Id"]

    def test_unhandled_exception_is_500_problem(self, reset_container):
        class ExplodingMediator(Mediator):
            async def send(self, request, cancellation=None):
                raise RuntimeError("boom")

        app.dependency_overrides[get_mediator] = lambda: ExplodingMediator(
            resolver=MagicMock()
        )
        try:
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.get(
                    AUTHORS, headers={"Correlation-Id": CORRELATION_ID}
                )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        body = response.json()
        assert body["title"] == "Internal Server Error"
        assert "boom" not in body["detail"]
        assert body["correlation_id"] == CORRELATION_ID
