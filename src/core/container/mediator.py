"""Mediator dependency factory.

Request-scoped: every call opens a fresh HandlerScope, so handlers are never
shared between HTTP requests.

Usage:
    from fastapi import Depends
    from src.core.container import get_mediator

    @router.get("/authors")
    async def list_authors(mediator: Mediator = Depends(get_mediator)):
        result = await mediator.send(ListAuthors())
"""

from src.application.mediator import Mediator
from src.core.container.handlers import get_handler_container
from src.core.container.infrastructure import get_logger


def get_mediator() -> Mediator:
    """Create a request-scoped Mediator.

    Returns:
        Mediator resolving handlers from a new scope of the app container.
    """
    return Mediator(
        resolver=get_handler_container().create_scope(),
        logger=get_logger(),
    )
