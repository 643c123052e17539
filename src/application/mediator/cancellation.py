"""Cooperative cancellation signal passed from callers to handlers.

The mediator never inspects the token: it hands the caller's instance to the
handler unchanged. Handlers decide where cancellation is observed (typically
right before mutating state).

Usage:
    token = CancellationToken()
    task = asyncio.create_task(mediator.send(command, token))
    token.cancel()

    # Inside a handler
    cancellation.raise_if_cancellation_requested()
"""

from __future__ import annotations

import asyncio

from src.application.mediator.errors import OperationCancelledError


class CancellationToken:
    """Caller-owned cancellation flag backed by an asyncio.Event.

    Attributes:
        reason: Optional human-readable reason recorded by cancel().
    """

    __slots__ = ("_event", "reason")

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: str | None = None

    @property
    def is_cancellation_requested(self) -> bool:
        """Return True once cancel() has been called."""
        return self._event.is_set()

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation. Idempotent; the first reason wins.

        Args:
            reason: Optional reason, surfaced in OperationCancelledError.
        """
        if not self._event.is_set():
            self.reason = reason
            self._event.set()

    def raise_if_cancellation_requested(self) -> None:
        """Raise OperationCancelledError if cancellation was requested.

        Raises:
            OperationCancelledError: If cancel() has been called.
        """
        if self._event.is_set():
            raise OperationCancelledError(self.reason or "Operation was cancelled")

    async def wait(self) -> None:
        """Suspend until cancellation is requested."""
        await self._event.wait()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancellation_requested})"
