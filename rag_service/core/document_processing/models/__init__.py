"""
Models for document processing pipeline.

Exports: Chunk, ContentKind, DocumentLocation, DocumentState, IngestionResult, SourceDocument
"""

from .chunk import Chunk, make_entry_id
from .document import ContentKind, DocumentLocation, DocumentState, SourceDocument
from .pipeline_result import IngestionResult

__all__ = [
    "Chunk",
    "make_entry_id",
    "ContentKind",
    "DocumentLocation",
    "DocumentState",
    "SourceDocument",
    "IngestionResult",
]
