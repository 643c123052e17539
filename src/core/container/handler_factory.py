"""Handler Factory - Auto-wire handler dependencies from type hints.

This module provides automatic dependency injection for CQRS handlers
based on their __init__ type hints. It introspects handler constructors
once, at registration time, and resolves dependencies from the container.

Architecture:
- get_type_hints() reads the handler's constructor annotations
- Protocol type names map to container factory functions
- Explicit overrides win over container lookups
- Optional dependencies that cannot be resolved fall back to None

Usage:
    from src.core.container.handler_factory import build_handler_factory, create_handler

    build = build_handler_factory(CreateAuthorHandler)  # introspects once
    handler = build()
    handler = create_handler(CreateAuthorHandler)
    handler = create_handler(CreateAuthorHandler, author_repo=fake_repo)
"""

import inspect
from types import NoneType, UnionType
from typing import Any, Callable, TypeVar, Union, get_args, get_origin, get_type_hints

T = TypeVar("T")


# =============================================================================
# Dependency Type Mappings
# =============================================================================

# Protocol/implementation type names -> container factory function names
SINGLETON_TYPES: dict[str, str] = {
    # Storage
    "AuthorRepository": "get_author_repository",
    "InMemoryAuthorRepository": "get_author_repository",
    "BookRepository": "get_book_repository",
    "InMemoryBookRepository": "get_book_repository",
    # Logging
    "LoggerProtocol": "get_logger",
    "ConsoleAdapter": "get_logger",
}


def get_type_name(annotation: Any) -> str:
    """Extract type name from annotation.

    Handles class types, ``X | None`` unions and string forward references.

    Args:
        annotation: Type annotation (class or string).

    Returns:
        Type name as string.

    Example:
        >>> get_type_name(AuthorRepository | None)
        'AuthorRepository'
    """
    if annotation is None or annotation is NoneType:
        return "None"

    origin = get_origin(annotation)
    if origin is Union or origin is UnionType:
        for arg in get_args(annotation):
            if arg is not NoneType:
                return get_type_name(arg)
        return "None"

    if isinstance(annotation, type):
        return annotation.__name__

    if isinstance(annotation, str):
        return annotation.split(".")[-1]

    return str(annotation).split(".")[-1].rstrip("'>")


def analyze_handler_dependencies(handler_class: type) -> dict[str, dict[str, Any]]:
    """Analyze handler __init__ to discover dependencies.

    Args:
        handler_class: Handler class to analyze.

    Returns:
        Dict mapping parameter names to dependency info dicts.
        Each info dict contains keys: type_name (str), annotation,
        is_optional (bool), has_default (bool).
    """
    init_method = getattr(handler_class, "__init__", None)
    if init_method is None or init_method is object.__init__:
        return {}

    signature = inspect.signature(init_method)
    try:
        hints = get_type_hints(init_method)
    except NameError:
        # Unresolvable forward reference; fall back to raw annotations
        hints = {
            name: param.annotation
            for name, param in signature.parameters.items()
            if param.annotation is not inspect.Parameter.empty
        }
    hints.pop("return", None)

    dependencies: dict[str, dict[str, Any]] = {}

    for param_name, param in signature.parameters.items():
        if param_name == "self" or param.kind in (
            inspect.Parameter.VAR_POSITIONAL,
            inspect.Parameter.VAR_KEYWORD,
        ):
            continue

        annotation = hints.get(param_name, param.annotation)
        origin = get_origin(annotation)
        is_optional = (origin is Union or origin is UnionType) and NoneType in get_args(
            annotation
        )

        dependencies[param_name] = {
            "type_name": get_type_name(annotation),
            "annotation": annotation,
            "is_optional": is_optional,
            "has_default": param.default is not inspect.Parameter.empty,
        }

    return dependencies


def _get_singleton_factory(type_name: str) -> Callable[[], Any]:
    """Get the container factory for a singleton type.

    Raises:
        ValueError: If type is not known to the container.
    """
    from src.core.container import infrastructure

    factory_name = SINGLETON_TYPES.get(type_name)
    if factory_name is None:
        raise ValueError(f"Unknown singleton type: {type_name}")

    factory: Callable[[], Any] = getattr(infrastructure, factory_name)
    return factory


def build_handler_factory(handler_class: type[T], **overrides: Any) -> Callable[[], T]:
    """Analyze a handler once and return a builder for new instances.

    Constructor introspection happens here. The returned callable only
    invokes the container factories captured for each parameter.

    Args:
        handler_class: Handler class to wire.
        **overrides: Explicit dependency values (by parameter name).

    Returns:
        Zero-argument callable creating a new handler_class instance.

    Raises:
        ValueError: If a required dependency cannot be resolved.
    """
    suppliers: dict[str, Callable[[], Any]] = {}

    for param_name, dep_info in analyze_handler_dependencies(handler_class).items():
        if param_name in overrides:
            value = overrides[param_name]
            suppliers[param_name] = lambda value=value: value
            continue

        try:
            suppliers[param_name] = _get_singleton_factory(dep_info["type_name"])
        except ValueError:
            if dep_info["has_default"]:
                continue
            if dep_info["is_optional"]:
                suppliers[param_name] = lambda: None
                continue
            raise ValueError(
                f"Cannot resolve dependency '{param_name}' "
                f"of type '{dep_info['type_name']}' for {handler_class.__name__}"
            ) from None

    def build() -> T:
        return handler_class(
            **{name: supplier() for name, supplier in suppliers.items()}
        )

    return build


def create_handler(handler_class: type[T], **overrides: Any) -> T:
    """Create handler instance with auto-wired dependencies.

    Args:
        handler_class: Handler class to instantiate.
        **overrides: Explicit dependency overrides (by parameter name).

    Returns:
        Handler instance with injected dependencies.

    Raises:
        ValueError: If a required dependency cannot be resolved.

    Example:
        >>> handler = create_handler(GetAuthorHandler)
        >>> result = await handler.handle(GetAuthor(author_id=id), token)
    """
    return build_handler_factory(handler_class, **overrides)()


def get_supported_dependencies() -> list[str]:
    """Get list of dependency type names the container can inject."""
    return list(SINGLETON_TYPES.keys())
