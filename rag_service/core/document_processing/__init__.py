"""
Document processing pipeline for ingestion.

Self-contained Lambda-ready module for extracting, chunking, embedding and
indexing documents.

Dependencies: pydantic, pydantic_settings
System role: Document ingestion pipeline
"""

from .configs import (
    DocumentPipelineSettings,
    get_pipeline_settings,
)
from .models import Chunk, ContentKind, DocumentState, IngestionResult

__all__ = [
    "DocumentPipelineSettings",
    "get_pipeline_settings",
    "Chunk",
    "ContentKind",
    "DocumentState",
    "IngestionResult",
]
