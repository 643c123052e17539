"""Correlation middleware to tag every request with a correlation ID.

- Reads the ``Correlation-Id`` request header (name from settings); a
  missing or non-UUID value is replaced with a generated UUID
- Echoes it on the response header
- Exposes get_correlation_id() for logging calls outside request handlers
- Stores it on request.state for exception handlers that run after the
  middleware has returned
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import UUID, uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.core.config import settings

correlation_id_context: ContextVar[str | None] = ContextVar(
    "correlation_id", default=None
)


def get_correlation_id() -> str | None:
    """Return the current correlation ID.

    Returns:
        The current request correlation ID, or None outside a request.
    """
    return correlation_id_context.get()


def _parse_correlation_id(value: str | None) -> str:
    """Return the canonical form of a client UUID, or a new one if invalid."""
    if not value:
        return str(uuid4())
    try:
        return str(UUID(value))
    except ValueError:
        return str(uuid4())


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Starlette middleware that injects a correlation ID into each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Set the correlation ID for the request and propagate it.

        Args:
            request: Incoming request.
            call_next: Next handler.

        Returns:
            Response with the correlation header added.
        """
        header = settings.correlation_id_header
        correlation_id = _parse_correlation_id(request.headers.get(header))
        request.state.correlation_id = correlation_id

        token = correlation_id_context.set(correlation_id)
        structlog.contextvars.bind_contextvars(correlation_id=correlation_id)
        try:
            response = await call_next(request)
            response.headers[header] = correlation_id
            return response
        finally:
            structlog.contextvars.unbind_contextvars("correlation_id")
            correlation_id_context.reset(token)
