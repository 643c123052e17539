"""CQRS Registry Computed Views and Helper Functions.

Utility functions for introspecting the CQRS registry.
Used by the handler container, tests, and documentation.
"""

import inspect
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.cqrs.metadata import (
        CommandMetadata,
        CQRSCategory,
        QueryMetadata,
    )


def get_all_commands() -> list[type]:
    """Get all registered command classes.

    Example:
        >>> CreateAuthor in get_all_commands()
        True
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta.command_class for meta in COMMAND_REGISTRY]


def get_all_queries() -> list[type]:
    """Get all registered query classes."""
    from src.application.cqrs.registry import QUERY_REGISTRY

    return [meta.query_class for meta in QUERY_REGISTRY]


def get_commands_by_category(category: "CQRSCategory") -> list["CommandMetadata"]:
    """Get command metadata filtered by category.

    Example:
        >>> from src.application.cqrs.metadata import CQRSCategory
        >>> len(get_commands_by_category(CQRSCategory.AUTHORS))
        3
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    return [meta for meta in COMMAND_REGISTRY if meta.category == category]


def get_queries_by_category(category: "CQRSCategory") -> list["QueryMetadata"]:
    """Get query metadata filtered by category."""
    from src.application.cqrs.registry import QUERY_REGISTRY

    return [meta for meta in QUERY_REGISTRY if meta.category == category]


def get_command_metadata(command_class: type) -> "CommandMetadata | None":
    """Get metadata for a specific command class.

    Returns:
        CommandMetadata if found, None otherwise.
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY

    for meta in COMMAND_REGISTRY:
        if meta.command_class is command_class:
            return meta
    return None


def get_query_metadata(query_class: type) -> "QueryMetadata | None":
    """Get metadata for a specific query class."""
    from src.application.cqrs.registry import QUERY_REGISTRY

    for meta in QUERY_REGISTRY:
        if meta.query_class is query_class:
            return meta
    return None


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Get registry statistics for documentation and monitoring.

    Example:
        >>> stats = get_statistics()
        >>> stats["total_operations"]
        11
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    return {
        "total_commands": len(COMMAND_REGISTRY),
        "total_queries": len(QUERY_REGISTRY),
        "total_operations": len(COMMAND_REGISTRY) + len(QUERY_REGISTRY),
        "commands_by_category": dict(
            Counter(meta.category.value for meta in COMMAND_REGISTRY)
        ),
        "queries_by_category": dict(
            Counter(meta.category.value for meta in QUERY_REGISTRY)
        ),
        "commands_with_result_dto": sum(
            1 for meta in COMMAND_REGISTRY if meta.has_result_dto
        ),
        "list_queries": sum(1 for meta in QUERY_REGISTRY if meta.returns_list),
    }


def get_all_handler_classes() -> list[type]:
    """Get all registered handler classes (commands + queries)."""
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    handlers: dict[type, None] = {}
    for cmd_meta in COMMAND_REGISTRY:
        handlers[cmd_meta.handler_class] = None
    for qry_meta in QUERY_REGISTRY:
        handlers[qry_meta.handler_class] = None
    return list(handlers)


def validate_registry_consistency() -> list[str]:
    """Validate registry for common issues.

    Checks:
    - No request class appears twice
    - No handler class serves two requests
    - Every request class derives from Request and declares its response type
    - Every handler has an async handle(request, cancellation) method

    Returns:
        List of error messages. Empty if registry is consistent.
    """
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY
    from src.application.mediator import InvalidRequestError, Request, response_type_of

    errors: list[str] = []

    pairs: list[tuple[type, type]] = [
        (meta.command_class, meta.handler_class) for meta in COMMAND_REGISTRY
    ] + [(meta.query_class, meta.handler_class) for meta in QUERY_REGISTRY]

    request_classes = [request_class for request_class, _ in pairs]
    if len(request_classes) != len(set(request_classes)):
        errors.append("Duplicate request classes in CQRS registry")

    handler_classes = [handler_class for _, handler_class in pairs]
    if len(handler_classes) != len(set(handler_classes)):
        errors.append("Handler class registered for more than one request")

    for request_class, handler_class in pairs:
        if not issubclass(request_class, Request):
            errors.append(f"{request_class.__name__} does not derive from Request")
        else:
            try:
                response_type_of(request_class)
            except InvalidRequestError as e:
                errors.append(str(e))

        handle = getattr(handler_class, "handle", None)
        if handle is None or not inspect.iscoroutinefunction(handle):
            errors.append(f"Handler {handler_class.__name__} missing async handle() method")
            continue
        params = list(inspect.signature(handle).parameters)
        if len(params) != 3:
            errors.append(
                f"Handler {handler_class.__name__}.handle() must accept "
                f"(request, cancellation)"
            )

    return errors
