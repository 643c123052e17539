"""API v1 routers.

RESTful resource-based endpoints. All routes are generated from the Route
Metadata Registry at startup; see routes/registry.py for the route catalog.

Resources:
    /api/v1/authors   - Author management
    /api/v1/books     - Book management
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
