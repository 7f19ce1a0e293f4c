"""
Application layer.

Request-level orchestration shared by the Lambda handlers and the HTTP app.
"""

from rag_service.application.ingestion_service import IngestionSummary, StorageIngestionService
from rag_service.application.query_service import QueryService, parse_query_body
from rag_service.application.service_container import ServiceContainer

__all__ = [
    "IngestionSummary",
    "StorageIngestionService",
    "QueryService",
    "parse_query_body",
    "ServiceContainer",
]
