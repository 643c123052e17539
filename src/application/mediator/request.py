"""Request marker types and response-type introspection.

Every command and query is a subclass of Request parameterized with the
response type its handler produces:

    @dataclass(frozen=True, kw_only=True)
    class GetAuthor(Request[Result[AuthorResult, DomainError]]):
        author_id: UUID

The declared response type, together with the concrete request class, forms
the key the mediator uses to look up a handler. No reflection over handler
implementations happens at dispatch time.
"""

from functools import lru_cache
from types import NoneType, UnionType
from typing import Any, Generic, TypeVar, Union, get_args, get_origin

from src.application.mediator.errors import InvalidRequestError
from src.application.mediator.unit import Unit

TResponse = TypeVar("TResponse")


class Request(Generic[TResponse]):
    """Marker base for everything that can be sent through the mediator."""

    __slots__ = ()


class UnitRequest(Request[Unit]):
    """Request whose handler returns Unit."""

    __slots__ = ()


@lru_cache(maxsize=None)
def response_type_of(request_type: type) -> Any:
    """Return the response type a request class declares.

    Walks the MRO so subclasses of a parameterized request inherit its
    response type.

    Args:
        request_type: Concrete Request subclass.

    Returns:
        Declared response type (may be a parameterized generic or union).

    Raises:
        InvalidRequestError: If the class never binds Request's type parameter.
    """
    for klass in request_type.__mro__:
        for base in getattr(klass, "__orig_bases__", ()):
            if get_origin(base) is Request:
                (response_type,) = get_args(base)
                if isinstance(response_type, TypeVar):
                    break
                return response_type
    raise InvalidRequestError(
        f"{request_type.__qualname__} does not declare a response type; "
        f"subclass Request[<ResponseType>]"
    )


def describe_type(tp: Any) -> str:
    """Render a type for error messages and logs.

    Example:
        >>> describe_type(Result[AuthorResult, DomainError])
        'Result[AuthorResult, DomainError]'
    """
    if tp is None or tp is NoneType:
        return "None"
    origin = get_origin(tp)
    if origin is Union or origin is UnionType:
        return " | ".join(describe_type(arg) for arg in get_args(tp))
    if origin is not None:
        args = ", ".join(describe_type(arg) for arg in get_args(tp))
        return f"{describe_type(origin)}[{args}]"
    return getattr(tp, "__qualname__", None) or getattr(tp, "__name__", repr(tp))
