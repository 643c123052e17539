"""Mediator error types.

Unlike the DomainError dataclasses (returned inside Result), these are
exceptions: they signal programming or configuration mistakes (missing
registration, bad argument) and must reach the caller of send() unchanged.

Hierarchy:
    MediatorError
    ├── InvalidRequestError (also ValueError)
    ├── HandlerNotFoundError (also LookupError)
    ├── DuplicateHandlerError
    └── OperationCancelledError
"""

from typing import Any


class MediatorError(Exception):
    """Base class for all errors raised by the request dispatcher."""


class InvalidRequestError(MediatorError, ValueError):
    """The value passed to send() is not a usable request.

    Raised for None, for objects that are not Request instances, and for
    request classes that never declare their response type.
    """


class HandlerNotFoundError(MediatorError, LookupError):
    """No handler is registered for a (request type, response type) pair.

    This is a wiring error; retrying will not help.

    Attributes:
        request_type: Concrete request class that was sent.
        response_type: Response type the request class declares.
    """

    def __init__(self, request_type: type, response_type: Any) -> None:
        from src.application.mediator.request import describe_type

        self.request_type = request_type
        self.response_type = response_type
        request_name = describe_type(request_type)
        response_name = describe_type(response_type)
        super().__init__(
            f"No handler registered for request type {request_name} "
            f"with response type {response_name}. Ensure a handler for "
            f"{request_name} is listed in the CQRS registry and registered "
            f"in the handler container."
        )


class DuplicateHandlerError(MediatorError):
    """A second handler was registered for an already registered pair."""


class OperationCancelledError(MediatorError):
    """A handler observed a cancellation request from its caller."""
