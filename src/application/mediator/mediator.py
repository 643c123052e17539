"""Mediator - dispatches requests to their single registered handler.

Flow of send():
    1. Reject None / non-Request values (InvalidRequestError)
    2. Compute the lookup key (concrete request type, declared response type)
    3. Resolve a handler from the scoped resolver
    4. Missing handler -> HandlerNotFoundError naming both types
    5. Await handler.handle(request, cancellation) and return its value

Handler exceptions are never wrapped or logged here; they propagate to the
caller exactly as raised. Expected business failures travel as Failure values
inside the handler's Result, not as exceptions.

Usage:
    mediator = Mediator(resolver=container.create_scope(), logger=logger)
    result = await mediator.send(GetAuthor(author_id=author_id))
"""

from typing import Any, TypeVar, cast

from src.application.mediator.cancellation import CancellationToken
from src.application.mediator.errors import HandlerNotFoundError, InvalidRequestError
from src.application.mediator.handler import HandlerResolverProtocol
from src.application.mediator.request import Request, describe_type, response_type_of
from src.domain.protocols.logger_protocol import LoggerProtocol

TResponse = TypeVar("TResponse")


class Mediator:
    """Single entry point for sending commands and queries.

    Attributes:
        resolver: Supplies handler instances (usually a HandlerScope).
    """

    def __init__(
        self,
        resolver: HandlerResolverProtocol,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.resolver = resolver
        self._logger = logger

    async def send(
        self,
        request: Request[TResponse],
        cancellation: CancellationToken | None = None,
    ) -> TResponse:
        """Send a request to its handler and return the handler's response.

        Args:
            request: Command or query instance.
            cancellation: Token handed to the handler as-is. A fresh,
                never-cancelled token is used when omitted.

        Returns:
            Whatever the handler returns (Unit for void requests).

        Raises:
            InvalidRequestError: If request is None or not a Request.
            HandlerNotFoundError: If no handler is registered for the request.
            Exception: Any exception raised by the handler, unchanged.
        """
        if request is None:
            raise InvalidRequestError("request must not be None")
        if not isinstance(request, Request):
            raise InvalidRequestError(
                f"Expected a Request instance, got {type(request).__qualname__}"
            )

        request_type = type(request)
        response_type = response_type_of(request_type)

        handler = self.resolver.resolve(request_type, response_type)
        if handler is None:
            if self._logger is not None:
                self._logger.warning(
                    "handler_not_found",
                    request_type=request_type.__qualname__,
                    response_type=describe_type(response_type),
                )
            raise HandlerNotFoundError(request_type, response_type)

        if self._logger is not None:
            self._logger.debug(
                "request_dispatched",
                request_type=request_type.__qualname__,
                handler=type(handler).__qualname__,
            )

        token = cancellation if cancellation is not None else CancellationToken()
        handle = cast(Any, handler).handle
        return cast(TResponse, await handle(request, token))
