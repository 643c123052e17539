"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all v1 routes: FastAPI routes
and their OpenAPI metadata (summary, description, operation id, error
responses, tags) are generated from it at startup instead of being attached
to endpoint functions by decorators.

Core types:
    RouteMetadata: Complete route specification (method, path, handler, docs, errors)
    HTTPMethod: HTTP method enum (GET, POST, PUT, DELETE)
    ErrorSpec: Error response specification for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.v1.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/authors",
        handler=create_author,
        resource="authors",
        tags=["Authors"],
        summary="Create author",
        response_model=AuthorResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    """HTTP methods for API routes."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET) - cacheable
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE) - safe to retry
        NON_IDEMPOTENT: Side effects, not repeatable (POST) - do not retry
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response specification for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 404, 409)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)

    Examples:
        >>> ErrorSpec(status=404, description="Author not found")
        >>> ErrorSpec(status=409, description="Email already registered")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete specification for an API route.

    Identity fields:
        method: HTTP method
        path: URL path relative to the v1 prefix (e.g., "/authors/{author_id}")
        handler: Async endpoint function

    Grouping fields:
        resource: Resource category ("authors", "books")
        tags: OpenAPI tags

    OpenAPI documentation:
        summary: Short endpoint description
        description: Detailed endpoint description (markdown supported)
        operation_id: Stable operation ID for client generation

    Response:
        response_model: Pydantic model for success response (None for 204)
        status_code: Expected success status
        errors: Possible error responses, rendered as ProblemDetails in OpenAPI

    Behavior:
        idempotency: HTTP idempotency level
        deprecated: Whether endpoint is deprecated
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Response
    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    deprecated: bool = False
