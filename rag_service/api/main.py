"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, rag_service.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rag_service import __version__
from rag_service.api.deps.dependencies import get_service_cache, reset_service_cache
from rag_service.core.document_processing.lambda_utils.config import validate_environment
from rag_service.observability.logger import configure_logging
from rag_service.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import documents_router, health_router, query_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Validates configuration and pre-warms the shared clients on startup.
    """
    cache = get_service_cache()
    configure_logging(cache.settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    validate_environment(cache.settings)
    logger.info("Pre-warming service cache...")
    _ = cache.query_service
    if cache.settings.documents.bucket_name:
        _ = cache.ingestion_service
    logger.info("Service cache pre-warmed")

    yield

    # Shutdown
    reset_service_cache()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="RAG API Service",
        description="Retrieval-augmented question answering over uploaded documents",
        version=__version__,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Add observability middleware; correlation is outermost so request logs carry the ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(query_router, prefix="/api/v1")
    app.include_router(documents_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "rag_service.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
