"""Handler and resolver protocols used by the mediator."""

from typing import Any, Protocol, TypeVar, runtime_checkable

from src.application.mediator.cancellation import CancellationToken

TRequest = TypeVar("TRequest", contravariant=True)
TResult = TypeVar("TResult", covariant=True)


@runtime_checkable
class RequestHandler(Protocol[TRequest, TResult]):
    """Processes exactly one request type.

    Handlers are plain classes; the container builds them with their
    dependencies injected and a fresh instance per scope.
    """

    async def handle(
        self, request: TRequest, cancellation: CancellationToken
    ) -> TResult:
        """Process the request.

        Args:
            request: The request instance passed to Mediator.send().
            cancellation: The caller's token, passed through unchanged.

        Returns:
            Value of the request's declared response type.
        """
        ...


class HandlerResolverProtocol(Protocol):
    """Source of handler instances, keyed by request and response type."""

    def resolve(self, request_type: type, response_type: Any) -> object | None:
        """Return a handler instance, or None if nothing is registered."""
        ...
