"""
Core business logic module.

Contains chunking, ingestion, index bootstrap, retrieval and answer synthesis,
plus the exception hierarchy shared by every layer.
"""

from rag_service.core.exceptions import (
    ConfigurationError,
    DocumentProcessingError,
    EmbeddingError,
    EmbeddingFormatError,
    EmbeddingServiceError,
    EmptyContentError,
    GenerationError,
    IndexBootstrapError,
    InvalidQueryError,
    RAGServiceException,
    UnsupportedContentError,
    VectorStoreError,
)

__all__ = [
    "RAGServiceException",
    "ConfigurationError",
    "DocumentProcessingError",
    "UnsupportedContentError",
    "EmptyContentError",
    "EmbeddingError",
    "EmbeddingServiceError",
    "EmbeddingFormatError",
    "VectorStoreError",
    "IndexBootstrapError",
    "InvalidQueryError",
    "GenerationError",
]
