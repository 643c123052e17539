"""LoggerProtocol definition for structured logging.

Handlers, the mediator and the HTTP layer log through this protocol so
they never depend on a logging backend. Every call is an event name plus
key-value context:

    logger.info("author_created", author_id=str(author.id))

Context bound with bind() (or with_context()) is included in every later
call on the returned logger. The correlation ID of the current HTTP request
is merged in automatically by the adapter.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger with five levels and context binding."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failed operation.

        Args:
            message: Event name.
            error: Optional exception; adapters add error_type and
                error_message fields for it.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an unrecoverable failure (same arguments as error())."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger with context attached to every call.

        The original logger is left unchanged.

        Example:
            handler_logger = logger.bind(handler="CreateAuthorHandler")
            handler_logger.info("author_created", author_id=str(author_id))
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
