"""
Observability module.

Provides logging configuration, correlation ID tracking, structured-log
helpers and HTTP middleware.
"""

from rag_service.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from rag_service.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "set_correlation_id",
    "get_correlation_id",
    "clear_correlation_id",
]
