"""Tests for text extraction and content kind inference."""

from unittest.mock import MagicMock, patch

import pytest

from rag_service.core.document_processing.models import ContentKind
from rag_service.core.document_processing.tasks.parsing_task import (
    PdfTextExtractor,
    TextExtractionTask,
)
from rag_service.core.exceptions import (
    EmptyContentError,
    ExtractionError,
    UnsupportedContentError,
)


class TestContentKind:
    """Test ContentKind.from_key."""

    @pytest.mark.parametrize(
        ("key", "kind"),
        [
            ("doc1.txt", ContentKind.TEXT),
            ("folder/NOTES.TXT", ContentKind.TEXT),
            ("report.pdf", ContentKind.PDF),
            ("scans/Report.PDF", ContentKind.PDF),
            ("image.png", ContentKind.UNSUPPORTED),
            ("archive.txt.zip", ContentKind.UNSUPPORTED),
            ("no_extension", ContentKind.UNSUPPORTED),
        ],
    )
    def test_from_key(self, key: str, kind: ContentKind) -> None:
        """Should infer kind from the lowercase extension."""
        assert ContentKind.from_key(key) == kind


class TestTextExtractionTask:
    """Test TextExtractionTask.extract."""

    def test_plain_text_decoded(self) -> None:
        """Should decode UTF-8 text."""
        task = TextExtractionTask()

        text = task.extract("héllo wörld".encode("utf-8"), ContentKind.TEXT, "a.txt")

        assert text == "héllo wörld"

    def test_invalid_utf8_replaced(self) -> None:
        """Should replace undecodable bytes instead of failing."""
        task = TextExtractionTask()

        text = task.extract(b"abc\xff\xfedef", ContentKind.TEXT, "a.txt")

        assert text.startswith("abc")
        assert text.endswith("def")
        assert "�" in text

    def test_pdf_uses_extractor(self) -> None:
        """Should delegate PDF content to the configured extractor."""
        extractor = MagicMock()
        extractor.extract.return_value = "page one\npage two"
        task = TextExtractionTask(pdf_extractor=extractor)

        text = task.extract(b"%PDF-1.4", ContentKind.PDF, "a.pdf")

        assert text == "page one\npage two"
        extractor.extract.assert_called_once_with(b"%PDF-1.4")

    def test_pdf_extractor_failure_wrapped(self) -> None:
        """Should wrap extractor errors in ExtractionError with the document key."""
        extractor = MagicMock()
        extractor.extract.side_effect = RuntimeError("corrupt xref")
        task = TextExtractionTask(pdf_extractor=extractor)

        with pytest.raises(ExtractionError) as exc_info:
            task.extract(b"garbage", ContentKind.PDF, "broken.pdf")

        assert exc_info.value.document_key == "broken.pdf"
        assert exc_info.value.details["content_kind"] == "pdf"

    def test_unsupported_kind(self) -> None:
        """Should raise UnsupportedContentError for unknown kinds."""
        task = TextExtractionTask()

        with pytest.raises(UnsupportedContentError):
            task.extract(b"\x89PNG", ContentKind.UNSUPPORTED, "image.png")

    @pytest.mark.parametrize("content", [b"", b"   \n\t  "])
    def test_empty_text(self, content: bytes) -> None:
        """Should raise EmptyContentError for blank documents."""
        task = TextExtractionTask()

        with pytest.raises(EmptyContentError):
            task.extract(content, ContentKind.TEXT, "blank.txt")


class TestPdfTextExtractor:
    """Test PdfTextExtractor."""

    @patch("rag_service.core.document_processing.tasks.parsing_task.PdfReader")
    def test_joins_pages_with_newlines(self, mock_reader_cls: MagicMock) -> None:
        """Should join page text with newlines and tolerate empty pages."""
        pages = [MagicMock(), MagicMock(), MagicMock()]
        pages[0].extract_text.return_value = "first"
        pages[1].extract_text.return_value = None
        pages[2].extract_text.return_value = "third"
        mock_reader_cls.return_value.pages = pages

        text = PdfTextExtractor().extract(b"%PDF-1.7")

        assert text == "first\n\nthird"
