"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, docqa.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docqa import __version__
from docqa.api.deps import get_service_cache
from docqa.api.exception_handlers import register_exception_handlers
from docqa.configs import get_settings
from docqa.observability.logger import configure_logging
from docqa.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import health_router, rag_router, upload_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds every service at startup so missing configuration fails the boot,
    and disposes pooled connections on shutdown.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.upload_service
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    await cache.dispose()
    logger.info("Service cache disposed")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Document Q&A API",
        description="Upload documents and ask grounded questions over the knowledge base or a single file",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Last added runs first: correlation ID is bound before request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    register_exception_handlers(app)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(upload_router, prefix="/api/v1")
    app.include_router(rag_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "docqa.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
