"""Pytest configuration shared by unit, integration and API tests.

This configuration ensures:
1. Settings load in the testing environment (JSON logs, no /config)
2. Coroutine tests are marked for pytest-asyncio automatically
3. App-scoped singletons (repositories, handler container) are reset
   between tests that use them
"""

import inspect
import os

# Must be set before src.core.config is imported anywhere
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest  # noqa: E402

from src.core.container import (  # noqa: E402
    get_author_repository,
    get_book_repository,
    get_handler_container,
)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real handlers and storage"
    )
    config.addinivalue_line("markers", "api: HTTP tests through FastAPI TestClient")


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def reset_container():
    """Drop cached repositories and the handler container.

    The next get_*() call builds fresh, empty instances, so tests never see
    each other's authors and books.
    """
    get_author_repository.cache_clear()
    get_book_repository.cache_clear()
    get_handler_container.cache_clear()
    yield
    get_author_repository.cache_clear()
    get_book_repository.cache_clear()
    get_handler_container.cache_clear()
