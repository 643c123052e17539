"""Unit tests for mediator value types.

Tests cover:
- Unit singleton semantics (equality, hashing, copy, pickle)
- CancellationToken state and OperationCancelledError
- Response-type introspection on Request subclasses
- HandlerNotFoundError message
"""

import asyncio
import copy
import pickle
from dataclasses import dataclass
from typing import Generic, TypeVar

import pytest

from src.application.mediator import (
    UNIT,
    CancellationToken,
    HandlerNotFoundError,
    InvalidRequestError,
    MediatorError,
    OperationCancelledError,
    Request,
    Unit,
    UnitRequest,
    describe_type,
    response_type_of,
)
from src.application.dtos.author_dtos import AuthorResult
from src.application.queries.author_queries import GetAuthor
from src.core.errors import DomainError
from src.core.result import Result

T = TypeVar("T")


@pytest.mark.unit
class TestUnit:
    """Test the Unit singleton."""

    def test_constructor_returns_singleton(self):
        assert Unit() is Unit()
        assert Unit() is UNIT

    def test_units_are_equal_and_hash_alike(self):
        assert Unit() == UNIT
        assert hash(Unit()) == hash(UNIT)
        assert len({Unit(), UNIT}) == 1

    def test_unit_not_equal_to_other_empty_values(self):
        assert UNIT != None  # noqa: E711
        assert UNIT != ()
        assert UNIT != 0

    def test_copy_and_pickle_preserve_singleton(self):
        assert copy.copy(UNIT) is UNIT
        assert copy.deepcopy(UNIT) is UNIT
        assert pickle.loads(pickle.dumps(UNIT)) is UNIT

    def test_string_forms(self):
        assert str(UNIT) == "()"
        assert repr(UNIT) == "Unit()"


@pytest.mark.unit
class TestCancellationToken:
    """Test cooperative cancellation."""

    def test_new_token_is_not_cancelled(self):
        token = CancellationToken()

        assert token.is_cancellation_requested is False
        token.raise_if_cancellation_requested()  # no-op

    def test_cancel_sets_flag_and_raises(self):
        token = CancellationToken()
        token.cancel("client disconnected")

        assert token.is_cancellation_requested is True
        with pytest.raises(OperationCancelledError, match="client disconnected"):
            token.raise_if_cancellation_requested()

    def test_cancel_is_idempotent_first_reason_wins(self):
        token = CancellationToken()
        token.cancel("first")
        token.cancel("second")

        assert token.reason == "first"

    def test_cancel_without_reason_uses_default_message(self):
        token = CancellationToken()
        token.cancel()

        with pytest.raises(OperationCancelledError, match="Operation was cancelled"):
            token.raise_if_cancellation_requested()

    @pytest.mark.asyncio
    async def test_wait_returns_after_cancel(self):
        token = CancellationToken()
        waiter = asyncio.create_task(token.wait())
        await asyncio.sleep(0)
        assert not waiter.done()

        token.cancel()
        await asyncio.wait_for(waiter, timeout=1)

        assert waiter.done()


@dataclass(frozen=True)
class _Ping(Request[str]):
    pass


@dataclass(frozen=True)
class _PingSubclass(_Ping):
    pass


class _GenericRequest(Request[T], Generic[T]):
    pass


@pytest.mark.unit
class TestResponseTypeOf:
    """Test response type introspection."""

    def test_reads_declared_response_type(self):
        assert response_type_of(_Ping) is str

    def test_unit_request_declares_unit(self):
        @dataclass(frozen=True)
        class Fire(UnitRequest):
            pass

        assert response_type_of(Fire) is Unit

    def test_subclass_inherits_response_type(self):
        assert response_type_of(_PingSubclass) is str

    def test_parameterized_generic_response_type(self):
        assert response_type_of(GetAuthor) == Result[AuthorResult, DomainError]

    def test_unbound_type_variable_is_invalid(self):
        with pytest.raises(InvalidRequestError, match="does not declare a response type"):
            response_type_of(_GenericRequest)

    def test_describe_type_renders_generics(self):
        assert describe_type(str) == "str"
        assert describe_type(None) == "None"
        assert describe_type(int | None) == "int | None"
        assert describe_type(list[int]) == "list[int]"
        assert describe_type(response_type_of(GetAuthor)) == (
            "Result[AuthorResult, DomainError]"
        )


@pytest.mark.unit
class TestMediatorErrors:
    """Test mediator exception hierarchy."""

    def test_handler_not_found_message_names_both_types(self):
        error = HandlerNotFoundError(_Ping, str)

        assert "_Ping" in str(error)
        assert "response type str" in str(error)
        assert isinstance(error, MediatorError)
        assert isinstance(error, LookupError)

    def test_invalid_request_is_value_error(self):
        assert issubclass(InvalidRequestError, ValueError)
        assert issubclass(InvalidRequestError, MediatorError)
