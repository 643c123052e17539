"""Unit tests for the Mediator (request dispatcher).

Tests cover:
- Handler result returned unmodified
- Handler-not-found errors naming request and response types
- None / non-Request arguments rejected before resolution
- Independent resolution of different request types (incl. concurrency)
- Unit responses
- Cancellation token passed through verbatim
- Handler exceptions propagated unchanged

Architecture:
- Real HandlerContainer/HandlerScope with explicit factories
- No repositories, no auto-wiring
"""

import asyncio
from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from src.application.mediator import (
    UNIT,
    CancellationToken,
    HandlerNotFoundError,
    InvalidRequestError,
    Mediator,
    Request,
    Unit,
    UnitRequest,
)
from src.core.container.handlers import HandlerContainer


# =============================================================================
# Test Doubles
# =============================================================================


@dataclass(frozen=True)
class Query(Request[str]):
    value: str


@dataclass(frozen=True)
class Query2(Request[str]):
    pass


@dataclass(frozen=True)
class Command(UnitRequest):
    pass


@dataclass(frozen=True)
class QueryA(Request[str]):
    delay: float = 0.0


@dataclass(frozen=True)
class QueryB(Request[int]):
    delay: float = 0.0


@dataclass(frozen=True)
class Explode(Request[str]):
    pass


class QueryHandler:
    async def handle(self, request: Query, cancellation: CancellationToken) -> str:
        return f"Response: {request.value}"


class CommandHandler:
    def __init__(self) -> None:
        self.calls = 0

    async def handle(self, request: Command, cancellation: CancellationToken) -> Unit:
        self.calls += 1
        return UNIT


class QueryAHandler:
    async def handle(self, request: QueryA, cancellation: CancellationToken) -> str:
        await asyncio.sleep(request.delay)
        return "A"


class QueryBHandler:
    async def handle(self, request: QueryB, cancellation: CancellationToken) -> int:
        await asyncio.sleep(request.delay)
        return 42


class TokenRecordingHandler:
    def __init__(self) -> None:
        self.seen: list[CancellationToken] = []

    async def handle(self, request: Query, cancellation: CancellationToken) -> str:
        self.seen.append(cancellation)
        return "ok"


class ExplodingHandler:
    error = RuntimeError("handler blew up")

    async def handle(self, request: Explode, cancellation: CancellationToken) -> str:
        raise self.error


def _mediator(*registrations: tuple[type, object]) -> Mediator:
    container = HandlerContainer()
    for request_type, handler in registrations:
        container.register(request_type, type(handler), factory=lambda h=handler: h)
    container.freeze()
    return Mediator(resolver=container.create_scope())


# =============================================================================
# Dispatch
# =============================================================================


@pytest.mark.unit
class TestMediatorDispatch:
    """Test send() routing to registered handlers."""

    @pytest.mark.asyncio
    async def test_send_returns_handler_response(self):
        """send(Query("x")) returns exactly what the handler returns."""
        mediator = _mediator((Query, QueryHandler()))

        response = await mediator.send(Query("x"))

        assert response == "Response: x"

    @pytest.mark.asyncio
    async def test_send_returns_same_object_unmodified(self):
        """The handler's return value is passed through by identity."""
        payload = ["not", "copied"]

        class PayloadHandler:
            async def handle(self, request, cancellation):
                return payload

        mediator = _mediator((Query, PayloadHandler()))

        assert await mediator.send(Query("x")) is payload

    @pytest.mark.asyncio
    async def test_unit_request_returns_unit(self):
        """Commands without a meaningful result yield the Unit singleton."""
        handler = CommandHandler()
        mediator = _mediator((Command, handler))

        response = await mediator.send(Command())

        assert response == Unit()
        assert response is UNIT
        assert handler.calls == 1

    @pytest.mark.asyncio
    async def test_different_request_types_resolve_independently(self):
        """Sending QueryA never invokes the handler for QueryB."""
        handler_b = MagicMock()
        mediator = _mediator((QueryA, QueryAHandler()), (QueryB, handler_b))

        assert await mediator.send(QueryA()) == "A"
        handler_b.handle.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_sends_do_not_cross_contaminate(self):
        """QueryA and QueryB sent concurrently each get their own result."""
        mediator = _mediator((QueryA, QueryAHandler()), (QueryB, QueryBHandler()))

        result_a, result_b = await asyncio.gather(
            mediator.send(QueryA(delay=0.02)),
            mediator.send(QueryB(delay=0.0)),
        )

        assert result_a == "A"
        assert result_b == 42

    @pytest.mark.asyncio
    async def test_many_concurrent_sends_return_own_values(self):
        """Every concurrent send gets the response for its own request."""
        mediator = _mediator((Query, QueryHandler()))

        responses = await asyncio.gather(
            *(mediator.send(Query(str(i))) for i in range(20))
        )

        assert responses == [f"Response: {i}" for i in range(20)]


# =============================================================================
# Errors
# =============================================================================


@pytest.mark.unit
class TestMediatorErrors:
    """Test send() failure modes."""

    @pytest.mark.asyncio
    async def test_missing_handler_raises_handler_not_found(self):
        """Unregistered request types fail with HandlerNotFoundError."""
        mediator = _mediator((Query, QueryHandler()))

        with pytest.raises(HandlerNotFoundError) as exc_info:
            await mediator.send(Query2())

        assert "Query2" in str(exc_info.value)
        assert "str" in str(exc_info.value)
        assert exc_info.value.request_type is Query2
        assert exc_info.value.response_type is str

    @pytest.mark.asyncio
    async def test_handler_not_found_is_lookup_error(self):
        """HandlerNotFoundError can be caught as LookupError."""
        mediator = _mediator()

        with pytest.raises(LookupError):
            await mediator.send(Query("x"))

    @pytest.mark.asyncio
    async def test_none_request_raises_invalid_request(self):
        """send(None) fails with InvalidRequestError (a ValueError)."""
        mediator = _mediator((Query, QueryHandler()))

        with pytest.raises(InvalidRequestError):
            await mediator.send(None)  # type: ignore[arg-type]

        with pytest.raises(ValueError):
            await mediator.send(None)  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_none_request_does_not_attempt_resolution(self):
        """The resolver is never consulted for a None request."""
        resolver = MagicMock()
        mediator = Mediator(resolver=resolver)

        with pytest.raises(InvalidRequestError):
            await mediator.send(None)  # type: ignore[arg-type]

        resolver.resolve.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_request_value_raises_invalid_request(self):
        """Plain objects are rejected; only Request instances can be sent."""
        resolver = MagicMock()
        mediator = Mediator(resolver=resolver)

        with pytest.raises(InvalidRequestError, match="Request instance"):
            await mediator.send("not a request")  # type: ignore[arg-type]

        resolver.resolve.assert_not_called()

    @pytest.mark.asyncio
    async def test_handler_exception_propagates_unchanged(self):
        """Handler exceptions reach the caller as the same object."""
        mediator = _mediator((Explode, ExplodingHandler()))

        with pytest.raises(RuntimeError) as exc_info:
            await mediator.send(Explode())

        assert exc_info.value is ExplodingHandler.error

    @pytest.mark.asyncio
    async def test_missing_handler_logs_warning(self):
        """A missing registration is logged before raising."""
        logger = MagicMock()
        container = HandlerContainer()
        mediator = Mediator(resolver=container.create_scope(), logger=logger)

        with pytest.raises(HandlerNotFoundError):
            await mediator.send(Query("x"))

        logger.warning.assert_called_once_with(
            "handler_not_found", request_type="Query", response_type="str"
        )


# =============================================================================
# Cancellation
# =============================================================================


@pytest.mark.unit
class TestMediatorCancellation:
    """Test cancellation token pass-through."""

    @pytest.mark.asyncio
    async def test_handler_observes_same_token_instance(self):
        """The token passed to send() is the one the handler receives."""
        handler = TokenRecordingHandler()
        mediator = _mediator((Query, handler))
        token = CancellationToken()

        await mediator.send(Query("x"), token)

        assert handler.seen == [token]
        assert handler.seen[0] is token

    @pytest.mark.asyncio
    async def test_cancelled_token_is_passed_not_acted_on(self):
        """The mediator does not short-circuit on a cancelled token."""
        handler = TokenRecordingHandler()
        mediator = _mediator((Query, handler))
        token = CancellationToken()
        token.cancel("caller gave up")

        assert await mediator.send(Query("x"), token) == "ok"
        assert handler.seen[0].is_cancellation_requested is True

    @pytest.mark.asyncio
    async def test_fresh_token_supplied_when_omitted(self):
        """Without a token the handler gets a new, uncancelled one."""
        handler = TokenRecordingHandler()
        mediator = _mediator((Query, handler))

        await mediator.send(Query("x"))
        await mediator.send(Query("y"))

        first, second = handler.seen
        assert isinstance(first, CancellationToken)
        assert first.is_cancellation_requested is False
        assert first is not second
