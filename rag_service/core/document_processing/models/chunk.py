"""
Chunk domain model for document processing pipeline.

Represents a contiguous window of a document's extracted text, identified by
its parent document key and zero-based position.

Dependencies: pydantic
System role: Data structure for document chunks in ingestion pipeline
"""

from pydantic import BaseModel, Field


def make_entry_id(document_key: str, sequence_index: int) -> str:
    """
    Build the index entry identifier for a chunk.

    The identifier depends only on the document key and position, so
    re-ingesting a document overwrites its entries instead of duplicating them.

    Args:
        document_key: Storage key of the parent document
        sequence_index: Zero-based chunk position

    Returns:
        str: "{document_key}_chunk_{sequence_index}"
    """
    return f"{document_key}_chunk_{sequence_index}"


class Chunk(BaseModel):
    """Contiguous window of a document's extracted text."""

    text: str = Field(description="Chunk text content")
    sequence_index: int = Field(ge=0, description="Zero-based position within the parent document")
    document_key: str = Field(description="Storage key of the parent document")

    @property
    def entry_id(self) -> str:
        """Deterministic index entry identifier."""
        return make_entry_id(self.document_key, self.sequence_index)
