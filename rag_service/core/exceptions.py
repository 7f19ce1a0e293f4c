"""
Exception hierarchy for the RAG service.

Provides layered exception structure for ingestion, retrieval and generation errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RAGServiceException(Exception):
    """Base exception for all RAG service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(RAGServiceException):
    """Raised when required settings are missing or inconsistent."""

    pass


class EmbeddingDimensionError(ConfigurationError):
    """Raised when an embedding's length differs from the index dimension."""

    def __init__(self, expected: int, actual: int, model_id: str | None = None) -> None:
        details: dict[str, Any] = {"expected": expected, "actual": actual}
        if model_id:
            details["model_id"] = model_id
        super().__init__(
            f"Embedding dimension {actual} does not match index dimension {expected}",
            details,
        )


class DocumentProcessingError(RAGServiceException):
    """Base exception for per-document ingestion errors."""

    def __init__(
        self,
        message: str,
        document_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            document_key: Storage key of the document that failed
            details: Additional context
        """
        details = details or {}
        if document_key:
            details["document_key"] = document_key
        self.document_key = document_key
        super().__init__(message, details)


class UnsupportedContentError(DocumentProcessingError):
    """Raised when a document's extension is not ingestible. Recovered as a skip."""

    pass


class EmptyContentError(DocumentProcessingError):
    """Raised when a document has no extractable text. Recovered as a skip."""

    pass


class ExtractionError(DocumentProcessingError):
    """Raised when text extraction from a binary document fails."""

    def __init__(
        self,
        message: str,
        document_key: str | None = None,
        content_kind: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if content_kind:
            details["content_kind"] = content_kind
        super().__init__(message, document_key, details)


class DocumentFetchError(DocumentProcessingError):
    """Raised when a document cannot be read from object storage."""

    pass


class EmbeddingError(RAGServiceException):
    """Base exception for embedding generation failures."""

    pass


class EmbeddingServiceError(EmbeddingError):
    """Raised when the embedding model is unreachable or rejects the call."""

    pass


class EmbeddingTimeoutError(EmbeddingServiceError):
    """Raised when an embedding call exceeds its timeout."""

    pass


class EmbeddingFormatError(EmbeddingError):
    """Raised when the embedding model answers but the vector is missing or malformed."""

    pass


class VectorStoreError(RAGServiceException):
    """Raised when vector index operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (bootstrap, index, search)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class IndexBootstrapError(VectorStoreError):
    """Raised when the vector index cannot be verified or created."""

    def __init__(self, message: str, index_name: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["index_name"] = index_name
        super().__init__(message, operation="bootstrap", details=details)


class InvalidQueryError(RAGServiceException):
    """Raised when query input is missing or malformed."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize invalid query error.

        Args:
            message: Error message returned to the caller
            field: Request field that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class GenerationError(RAGServiceException):
    """Raised when the generative model invocation fails."""

    pass


class GenerationTimeoutError(GenerationError):
    """Raised when a generation call exceeds its timeout."""

    pass
