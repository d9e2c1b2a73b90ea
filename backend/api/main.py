"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.deps.container import ServiceContainer
from backend.api.error_handlers import register_exception_handlers
from backend.configs import Settings, get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    chat_router,
    documents_router,
    health_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    container: ServiceContainer = app.state.services

    # Startup
    logger.info("Initializing services...")
    await container.initialize()

    yield

    # Shutdown
    await container.shutdown()


def create_app(
    settings: Settings | None = None,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Application settings (loaded from environment if None)
        container: Pre-built service container (built from settings if None)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or (container.settings if container else get_settings())
    container = container or ServiceContainer(settings)

    app = FastAPI(
        title="MemoryVault API",
        description="Document assistant answering questions from your own uploads",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.services = container

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware (last added runs first)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")

    return app


def build_app() -> FastAPI:
    """Entry point for `uvicorn --factory backend.api.main:build_app`."""
    settings = get_settings()
    configure_logging(settings.log_level)
    return create_app(settings)


if __name__ == "__main__":
    uvicorn.run(
        "backend.api.main:build_app",
        factory=True,
        host="0.0.0.0",
        port=8000,
    )
