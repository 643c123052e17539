"""System router for non-versioned application endpoints.

Provides root, health and configuration endpoints. They never touch the
mediator or the repositories, so they stay available for health checks
even when the API layer misbehaves.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.core.config import settings


system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Welcome message with API status, version and docs path.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
        "docs": settings.docs_url or "",
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "healthy"}


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Configuration debug endpoint (development only).

    Returns:
        JSONResponse: Configuration details, or 403 outside development.
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "log_level": settings.log_level,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "seed_demo_data": settings.seed_demo_data,
        }
    )
