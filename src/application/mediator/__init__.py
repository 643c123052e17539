"""Mediator (request dispatcher) for commands and queries.

Exports:
    Mediator: Dispatches a request to its registered handler.
    Request, UnitRequest: Base classes declaring the response type.
    Unit, UNIT: Singleton "no value" response.
    CancellationToken: Cooperative cancellation passed through to handlers.
    RequestHandler, HandlerResolverProtocol: Handler/resolver protocols.
    MediatorError and subclasses: Dispatch failures.
"""

from src.application.mediator.cancellation import CancellationToken
from src.application.mediator.errors import (
    DuplicateHandlerError,
    HandlerNotFoundError,
    InvalidRequestError,
    MediatorError,
    OperationCancelledError,
)
from src.application.mediator.handler import HandlerResolverProtocol, RequestHandler
from src.application.mediator.mediator import Mediator
from src.application.mediator.request import (
    Request,
    UnitRequest,
    describe_type,
    response_type_of,
)
from src.application.mediator.unit import UNIT, Unit

__all__ = [
    "CancellationToken",
    "DuplicateHandlerError",
    "HandlerNotFoundError",
    "HandlerResolverProtocol",
    "InvalidRequestError",
    "Mediator",
    "MediatorError",
    "OperationCancelledError",
    "Request",
    "RequestHandler",
    "UNIT",
    "Unit",
    "UnitRequest",
    "describe_type",
    "response_type_of",
]
