"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_mediator, ...

The container is organized into modules by concern:
- infrastructure: App-scoped singletons (logging, repositories)
- handler_factory: Auto-wiring of handler constructor dependencies
- handlers: Request-type -> handler registrations and per-request scopes
- mediator: Request-scoped Mediator dependency for FastAPI
"""

from src.core.container.handler_factory import build_handler_factory, create_handler
from src.core.container.handlers import (
    HandlerContainer,
    HandlerRegistration,
    HandlerScope,
    build_handler_container,
    get_handler_container,
)
from src.core.container.infrastructure import (
    get_author_repository,
    get_book_repository,
    get_logger,
)
from src.core.container.mediator import get_mediator

__all__ = [
    # Infrastructure
    "get_logger",
    "get_author_repository",
    "get_book_repository",
    # Handlers
    "build_handler_factory",
    "create_handler",
    "HandlerContainer",
    "HandlerRegistration",
    "HandlerScope",
    "build_handler_container",
    "get_handler_container",
    # Mediator
    "get_mediator",
]
