"""Handler container - maps request types to handler factories.

Registration happens once at startup from the CQRS registry; after that the
container is frozen and only read. Each unit of work (one HTTP request, one
test) opens a HandlerScope, which builds at most one instance of each
handler it is asked for.

Lookup key: ``(request class, declared response type)``. The response type is
read from the request class's ``Request[...]`` base, so a registration can
never disagree with what the mediator will ask for.

Usage:
    container = get_handler_container()
    scope = container.create_scope()
    handler = scope.resolve(GetAuthor, response_type_of(GetAuthor))
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable

from src.application.mediator import (
    DuplicateHandlerError,
    describe_type,
    response_type_of,
)
from src.core.container.handler_factory import build_handler_factory

type HandlerKey = tuple[type, Any]


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerRegistration:
    """One request type bound to the factory that builds its handler.

    Attributes:
        request_type: Concrete request class.
        response_type: Response type declared by request_type.
        handler_class: Handler class (for introspection and logging).
        factory: Zero-argument callable returning a new handler instance.
    """

    request_type: type
    response_type: Any
    handler_class: type
    factory: Callable[[], object]

    @property
    def key(self) -> HandlerKey:
        return (self.request_type, self.response_type)


class HandlerContainer:
    """Registry of handler factories, frozen after startup."""

    def __init__(self) -> None:
        self._registrations: dict[HandlerKey, HandlerRegistration] = {}
        self._frozen = False

    def register(
        self,
        request_type: type,
        handler_class: type,
        factory: Callable[[], object] | None = None,
    ) -> HandlerRegistration:
        """Register the single handler for a request type.

        Args:
            request_type: Request subclass declaring its response type.
            handler_class: Class implementing ``handle(request, cancellation)``.
            factory: Optional builder; defaults to auto-wiring handler_class
                through build_handler_factory(), introspected once here.

        Returns:
            The stored registration.

        Raises:
            RuntimeError: If the container has been frozen.
            InvalidRequestError: If request_type does not declare a response type.
            DuplicateHandlerError: If the pair is already registered.
        """
        if self._frozen:
            raise RuntimeError(
                "Handler container is frozen; register handlers before startup completes"
            )

        response_type = response_type_of(request_type)
        key: HandlerKey = (request_type, response_type)
        existing = self._registrations.get(key)
        if existing is not None:
            raise DuplicateHandlerError(
                f"{request_type.__qualname__} ({describe_type(response_type)}) is "
                f"already handled by {existing.handler_class.__qualname__}; "
                f"cannot also register {handler_class.__qualname__}"
            )

        registration = HandlerRegistration(
            request_type=request_type,
            response_type=response_type,
            handler_class=handler_class,
            factory=factory if factory is not None else build_handler_factory(handler_class),
        )
        self._registrations[key] = registration
        return registration

    def freeze(self) -> None:
        """Reject further registrations."""
        self._frozen = True

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def get_registration(
        self, request_type: type, response_type: Any
    ) -> HandlerRegistration | None:
        return self._registrations.get((request_type, response_type))

    @property
    def registrations(self) -> list[HandlerRegistration]:
        return list(self._registrations.values())

    def __len__(self) -> int:
        return len(self._registrations)

    def create_scope(self) -> "HandlerScope":
        """Open a new unit of work with its own handler instances."""
        return HandlerScope(self)


class HandlerScope:
    """Scoped resolver: one handler instance per registration per scope.

    Implements HandlerResolverProtocol.
    """

    def __init__(self, container: HandlerContainer) -> None:
        self._container = container
        self._instances: dict[HandlerKey, object] = {}

    def resolve(self, request_type: type, response_type: Any) -> object | None:
        """Return this scope's handler for the pair, building it on first use.

        Returns:
            Handler instance, or None if nothing is registered.
        """
        key: HandlerKey = (request_type, response_type)
        instance = self._instances.get(key)
        if instance is not None:
            return instance

        registration = self._container.get_registration(request_type, response_type)
        if registration is None:
            return None

        instance = registration.factory()
        self._instances[key] = instance
        return instance


def build_handler_container() -> HandlerContainer:
    """Register every handler listed in the CQRS registry and freeze.

    Returns:
        Frozen container.
    """
    from src.application.cqrs import COMMAND_REGISTRY, QUERY_REGISTRY

    container = HandlerContainer()
    for command_meta in COMMAND_REGISTRY:
        container.register(command_meta.command_class, command_meta.handler_class)
    for query_meta in QUERY_REGISTRY:
        container.register(query_meta.query_class, query_meta.handler_class)
    container.freeze()
    return container


@lru_cache()
def get_handler_container() -> HandlerContainer:
    """Get the application-scoped handler container.

    Built and frozen on first call (during application startup).
    """
    from src.core.container.infrastructure import get_logger

    container = build_handler_container()
    get_logger().info("handler_container_built", handlers=len(container))
    return container
