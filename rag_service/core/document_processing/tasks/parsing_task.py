"""
Text extraction task.

Turns raw document bytes into plain text. Plain text is decoded as UTF-8 with
replacement of undecodable bytes; PDFs go through a pluggable extractor.

Dependencies: pypdf
System role: First stage of document ingestion pipeline
"""

import logging
from io import BytesIO
from typing import Protocol

from pypdf import PdfReader

from rag_service.core.exceptions import (
    EmptyContentError,
    ExtractionError,
    UnsupportedContentError,
)

from ..models import ContentKind

logger = logging.getLogger(__name__)


class TextExtractor(Protocol):
    """Capability that turns binary document content into plain text."""

    def extract(self, content: bytes) -> str: ...


class PdfTextExtractor:
    """Extract text from PDF bytes page by page."""

    def extract(self, content: bytes) -> str:
        reader = PdfReader(BytesIO(content))
        pages = [page.extract_text() or "" for page in reader.pages]
        return "\n".join(pages)


class TextExtractionTask:
    """Extract plain text from a raw document according to its content kind."""

    def __init__(self, pdf_extractor: TextExtractor | None = None) -> None:
        """
        Initialize extraction task.

        Args:
            pdf_extractor: Extractor used for PDF content; defaults to PdfTextExtractor
        """
        self._pdf_extractor = pdf_extractor or PdfTextExtractor()

    def extract(self, content: bytes, kind: ContentKind, document_key: str) -> str:
        """
        Extract text from raw document bytes.

        Args:
            content: Raw document bytes
            kind: Content kind inferred from the storage key
            document_key: Storage key, used for error context

        Returns:
            str: Extracted text with at least one non-whitespace character

        Raises:
            UnsupportedContentError: When the content kind is not ingestible
            ExtractionError: When the PDF extractor fails
            EmptyContentError: When no text could be extracted
        """
        if kind == ContentKind.TEXT:
            text = content.decode("utf-8", errors="replace")
        elif kind == ContentKind.PDF:
            try:
                text = self._pdf_extractor.extract(content)
            except Exception as e:
                raise ExtractionError(
                    f"Failed to extract text from PDF: {e}",
                    document_key=document_key,
                    content_kind=kind.value,
                ) from e
        else:
            raise UnsupportedContentError(
                "Unsupported content type",
                document_key=document_key,
            )

        if not text or not text.strip():
            raise EmptyContentError(
                "Document contains no extractable text",
                document_key=document_key,
            )

        logger.debug(
            f"{__name__}:extract - Extracted text",
            extra={"document_key": document_key, "kind": kind.value, "length": len(text)},
        )
        return text
