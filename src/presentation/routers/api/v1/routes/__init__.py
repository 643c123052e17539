"""API Route Registry package.

Modules:
    metadata: Core types (RouteMetadata, HTTPMethod, ErrorSpec, IdempotencyLevel)
    registry: ROUTE_REGISTRY - List of all route specifications
    generator: register_routes_from_registry() - Generate FastAPI routes

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.presentation.routers.api.v1.routes.metadata import (
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

__all__ = [
    "RouteMetadata",
    "HTTPMethod",
    "ErrorSpec",
    "IdempotencyLevel",
]
