"""
Pipeline result model for document processing.

Represents the outcome of processing a document through the pipeline.

Dependencies: pydantic
System role: Return type for IngestionPipeline.ingest()
"""

from pydantic import BaseModel, Field

from .document import DocumentState


class IngestionResult(BaseModel):
    """Result of ingesting a single document."""

    document_key: str = Field(description="Storage key of the document")
    state: DocumentState = Field(description="Terminal state: completed, skipped or failed")
    chunk_count: int = Field(default=0, description="Number of non-empty chunks produced")
    indexed_ids: list[str] = Field(default_factory=list, description="Entry IDs written to the index")
    reason: str | None = Field(default=None, description="Why the document was skipped or failed")
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")
