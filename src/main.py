"""
Main FastAPI application entry point.

Builds the FastAPI application: lifespan (handler container, demo data),
correlation ID middleware, RFC 9457 exception handlers, the system router
and the v1 router generated from the route registry.

Run with:
    uvicorn src.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import (
    get_author_repository,
    get_book_repository,
    get_handler_container,
    get_logger,
)
from src.infrastructure.persistence.seed import seed_demo_data
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.correlation_middleware import (
    CorrelationIdMiddleware,
)
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup:
    - Build and freeze the handler container (fails fast on wiring errors)
    - Seed demo authors and books when enabled

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    get_handler_container()

    if settings.seed_demo_data:
        await seed_demo_data(
            get_author_repository(),
            get_book_repository(),
            logger=logger,
        )

    logger.info(
        "application_started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    logger.info("application_stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Demo Authors/Books API dispatching every operation through a mediator",
    version=settings.app_version,
    docs_url=settings.docs_url,
    redoc_url=settings.redoc_url,
    servers=[{"url": settings.api_base_url}],
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire correlation middleware (Correlation-Id header, log context)
app.add_middleware(CorrelationIdMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

# Include system routes (/, /health, /config)
app.include_router(system_router)

# Include API v1 routers (generated from ROUTE_REGISTRY)
app.include_router(v1_router)
