"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_ingestion_service,
    get_query_service,
    get_service_cache,
    get_settings_dependency,
    reset_service_cache,
)

__all__ = [
    "get_ingestion_service",
    "get_query_service",
    "get_service_cache",
    "get_settings_dependency",
    "reset_service_cache",
]
