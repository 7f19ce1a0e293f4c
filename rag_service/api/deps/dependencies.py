"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: rag_service.configs, rag_service.application
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends, HTTPException, status

from rag_service.application.ingestion_service import StorageIngestionService
from rag_service.application.query_service import QueryService
from rag_service.application.service_container import ServiceContainer
from rag_service.configs import Settings, get_settings


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


# Global service cache
_service_cache: ServiceContainer | None = None


def get_service_cache() -> ServiceContainer:
    """Get service container singleton."""
    global _service_cache
    if _service_cache is None:
        _service_cache = ServiceContainer(get_settings_dependency())
    return _service_cache


def reset_service_cache() -> None:
    """Drop the service container; the next request rebuilds it."""
    global _service_cache
    if _service_cache is not None:
        _service_cache.clear()
    _service_cache = None


def get_query_service(
    cache: ServiceContainer = Depends(get_service_cache),
) -> QueryService:
    """
    Get query service instance.

    Args:
        cache: Service container (injected via Depends)

    Returns:
        QueryService: Shared query service
    """
    return cache.query_service


def get_ingestion_service(
    cache: ServiceContainer = Depends(get_service_cache),
) -> StorageIngestionService:
    """
    Get storage ingestion service instance.

    Args:
        cache: Service container (injected via Depends)

    Returns:
        StorageIngestionService: Shared ingestion service

    Raises:
        HTTPException: 503 when no documents bucket is configured
    """
    if not cache.settings.documents.bucket_name:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="DOCUMENTS_BUCKET_NAME is not configured",
        )
    return cache.ingestion_service
