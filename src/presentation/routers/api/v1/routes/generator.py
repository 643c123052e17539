"""Route generator for the API Route Registry.

Provides register_routes_from_registry(), which converts declarative
RouteMetadata entries into FastAPI routes at application startup.

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    v1_router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.core.config import settings
from src.presentation.routers.api.v1.common_parameters import common_parameters
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import ErrorSpec, RouteMetadata


CORRELATION_ID_RESPONSE_HEADER: dict[str, Any] = {
    "description": (
        "The correlation ID for this request (same as request header or "
        "auto-generated if not provided)"
    ),
    "schema": {"type": "string", "format": "uuid"},
    "example": "12345678-1234-1234-1234-123456789abc",
}

# Every route declares the Correlation-Id header, so any of them can fail validation
_REQUEST_VALIDATION_ERROR = ErrorSpec(status=422, description="Request validation failed")


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Every generated route declares the common header parameters
    (Correlation-Id, User-Context, bearer token) and documents the
    Correlation-Id response header plus ProblemDetails error responses.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),  # Convert Sequence to list for FastAPI
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata),
            dependencies=[Depends(common_parameters)],
            deprecated=metadata.deprecated,
        )


def _build_responses(metadata: RouteMetadata) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict for a route.

    The success status and every error response document the
    ``Correlation-Id`` response header; errors use the ProblemDetails schema.

    Example:
        >>> _build_responses(get_author_metadata)[404]
        {"description": "Author not found", "model": ProblemDetails, "headers": {...}}
    """
    headers = {settings.correlation_id_header: CORRELATION_ID_RESPONSE_HEADER}
    responses: dict[int | str, dict[str, Any]] = {
        metadata.status_code: {"headers": headers},
    }
    for error in [_REQUEST_VALIDATION_ERROR, *(metadata.errors or [])]:
        responses[error.status] = {
            "description": error.description,
            "model": error.model or ProblemDetails,
            "headers": headers,
        }
    return responses
