"""
Source document models for the ingestion pipeline.

Content kinds, per-document lifecycle states and storage locations.

Dependencies: pydantic
System role: Data contracts between storage notifications and the pipeline
"""

from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, Field


class ContentKind(str, Enum):
    """Ingestible content kinds, inferred from the object key extension."""

    TEXT = "text"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_key(cls, document_key: str) -> "ContentKind":
        """Infer the content kind from a storage key (case-insensitive)."""
        suffix = PurePosixPath(document_key).suffix.lower()
        if suffix == ".txt":
            return cls.TEXT
        if suffix == ".pdf":
            return cls.PDF
        return cls.UNSUPPORTED


class DocumentState(str, Enum):
    """Lifecycle of one document through ingestion."""

    RECEIVED = "received"
    TEXT_EXTRACTED = "text_extracted"
    CHUNKED = "chunked"
    COMPLETED = "completed"
    SKIPPED = "skipped"
    FAILED = "failed"


class DocumentLocation(BaseModel):
    """Object reference extracted from a storage notification."""

    bucket: str = Field(..., description="Bucket that emitted the notification")
    key: str = Field(..., description="URL-decoded object key")
    size: int = Field(default=0, description="Object size in bytes, when reported")


class SourceDocument(BaseModel):
    """Raw document handed to the ingestion pipeline."""

    key: str = Field(..., description="Storage key; parent identity of every chunk")
    content: bytes = Field(..., description="Raw object bytes")
    kind: ContentKind = Field(..., description="Inferred content kind")
