"""Fixtures for HTTP-level tests."""

import pytest
from fastapi.testclient import TestClient

from src.main import app


@pytest.fixture
def client(reset_container):
    """TestClient running the app lifespan (demo data seeded) on fresh storage."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_author(client) -> dict:
    """First demo author (John Doe)."""
    authors = client.get("/api/v1/authors").json()["authors"]
    return next(a for a in authors if a["email"] == "john.doe@example.com")
