"""Tests for IngestionPipeline orchestration.

Covers the per-document state machine, idempotent identifiers, skip and
failure isolation, and bootstrap error propagation.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from rag_service.core.document_processing.entrypoint import IngestionPipeline
from rag_service.core.document_processing.models import (
    ContentKind,
    DocumentState,
    SourceDocument,
)
from rag_service.core.exceptions import (
    EmbeddingDimensionError,
    EmbeddingFormatError,
    EmbeddingServiceError,
    IndexBootstrapError,
    VectorStoreError,
)


def _written_ids(vector_store: MagicMock) -> list[str]:
    return [call.args[0].entry_id for call in vector_store.write_entry.await_args_list]


class TestIngest:
    """Test IngestionPipeline.ingest for a single document."""

    @pytest.mark.asyncio
    async def test_plain_text_document_completed(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_embedding_client: MagicMock,
        mock_vector_store: MagicMock,
        mock_index_manager: MagicMock,
    ) -> None:
        """Should chunk, embed and index a 2500-char document as 3 entries."""
        result = await ingestion_pipeline.ingest("doc1.txt", b"z" * 2500, ContentKind.TEXT)

        assert result.state == DocumentState.COMPLETED
        assert result.chunk_count == 3
        assert result.indexed_ids == ["doc1.txt_chunk_0", "doc1.txt_chunk_1", "doc1.txt_chunk_2"]
        assert mock_embedding_client.embed.await_count == 3
        assert _written_ids(mock_vector_store) == result.indexed_ids
        mock_index_manager.ensure_index.assert_awaited_once_with("test-index", 4)

    @pytest.mark.asyncio
    async def test_entry_contents(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_vector_store: MagicMock,
        fake_vector: list[float],
    ) -> None:
        """Should write text, vector and source key for each chunk."""
        await ingestion_pipeline.ingest("notes/a.txt", b"hello world", ContentKind.TEXT)

        entry = mock_vector_store.write_entry.await_args.args[0]
        assert entry.entry_id == "notes/a.txt_chunk_0"
        assert entry.text == "hello world"
        assert entry.vector == fake_vector
        assert entry.source_document_key == "notes/a.txt"

    @pytest.mark.asyncio
    async def test_kind_inferred_from_key(
        self,
        ingestion_pipeline: IngestionPipeline,
    ) -> None:
        """Should infer content kind when none is given."""
        result = await ingestion_pipeline.ingest("readme.txt", b"content")

        assert result.state == DocumentState.COMPLETED

    @pytest.mark.asyncio
    async def test_reingestion_is_idempotent(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_vector_store: MagicMock,
    ) -> None:
        """Should produce the same entry identifiers on re-ingestion."""
        content = b"Retrieval augmented generation. " * 120

        first = await ingestion_pipeline.ingest("rag.txt", content, ContentKind.TEXT)
        second = await ingestion_pipeline.ingest("rag.txt", content, ContentKind.TEXT)

        assert first.indexed_ids == second.indexed_ids
        assert len(set(_written_ids(mock_vector_store))) == len(first.indexed_ids)

    @pytest.mark.asyncio
    async def test_unsupported_document_skipped(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_embedding_client: MagicMock,
    ) -> None:
        """Should skip unsupported formats without embedding."""
        result = await ingestion_pipeline.ingest("photo.png", b"\x89PNG", ContentKind.UNSUPPORTED)

        assert result.state == DocumentState.SKIPPED
        assert result.reason == "Unsupported content type"
        mock_embedding_client.embed.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_document_skipped(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_vector_store: MagicMock,
    ) -> None:
        """Should skip documents whose text is whitespace only."""
        result = await ingestion_pipeline.ingest("blank.txt", b"  \n\n \t ", ContentKind.TEXT)

        assert result.state == DocumentState.SKIPPED
        mock_vector_store.write_entry.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_pdf_extraction_failure_fails_document(
        self,
        mock_embedding_client: MagicMock,
        mock_index_manager: MagicMock,
        mock_vector_store: MagicMock,
        pipeline_settings,
    ) -> None:
        """Should mark a document Failed when PDF extraction fails."""
        extractor = MagicMock()
        extractor.extract.side_effect = ValueError("EOF marker not found")
        pipeline = IngestionPipeline(
            mock_embedding_client,
            mock_index_manager,
            mock_vector_store,
            settings=pipeline_settings,
            pdf_extractor=extractor,
        )

        result = await pipeline.ingest("broken.pdf", b"%PDF", ContentKind.PDF)

        assert result.state == DocumentState.FAILED
        assert "EOF marker not found" in result.reason

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [
            EmbeddingServiceError("Embedding service unavailable"),
            EmbeddingFormatError("Failed to get embedding or embedding format is incorrect"),
        ],
    )
    async def test_embedding_failure_fails_document(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_embedding_client: MagicMock,
        error: Exception,
    ) -> None:
        """Should mark the document Failed on embedding errors."""
        mock_embedding_client.embed.side_effect = error

        result = await ingestion_pipeline.ingest("doc.txt", b"text", ContentKind.TEXT)

        assert result.state == DocumentState.FAILED
        assert result.indexed_ids == []

    @pytest.mark.asyncio
    async def test_partial_indexing_kept_on_failure(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_vector_store: MagicMock,
        mock_embedding_client: MagicMock,
    ) -> None:
        """Should stop at the failing chunk and report chunks already written."""
        mock_vector_store.write_entry.side_effect = [
            None,
            VectorStoreError("Failed to index entry", operation="index"),
        ]

        result = await ingestion_pipeline.ingest("long.txt", b"q" * 2500, ContentKind.TEXT)

        assert result.state == DocumentState.FAILED
        assert result.chunk_count == 3
        assert result.indexed_ids == ["long.txt_chunk_0"]
        assert mock_embedding_client.embed.await_count == 2

    @pytest.mark.asyncio
    async def test_dimension_mismatch_propagates(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_embedding_client: MagicMock,
    ) -> None:
        """Should raise dimension mismatches instead of failing the document."""
        mock_embedding_client.embed.side_effect = EmbeddingDimensionError(4, 1536)

        with pytest.raises(EmbeddingDimensionError):
            await ingestion_pipeline.ingest("doc.txt", b"text", ContentKind.TEXT)

    @pytest.mark.asyncio
    async def test_bootstrap_failure_propagates(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_index_manager: MagicMock,
        mock_embedding_client: MagicMock,
    ) -> None:
        """Should abort before processing when the index cannot be bootstrapped."""
        mock_index_manager.ensure_index.side_effect = IndexBootstrapError(
            "Failed to ensure index: AuthorizationException", index_name="test-index"
        )

        with pytest.raises(IndexBootstrapError):
            await ingestion_pipeline.ingest("doc.txt", b"text", ContentKind.TEXT)

        mock_embedding_client.embed.assert_not_awaited()


class TestIngestBatch:
    """Test IngestionPipeline.ingest_batch."""

    @pytest.mark.asyncio
    async def test_failure_isolated_and_order_kept(
        self,
        ingestion_pipeline: IngestionPipeline,
        mock_embedding_client: MagicMock,
        mock_index_manager: MagicMock,
        fake_vector: list[float],
    ) -> None:
        """Should continue after a failing document and bootstrap once."""
        mock_embedding_client.embed = AsyncMock(
            side_effect=[fake_vector, EmbeddingServiceError("throttled"), fake_vector]
        )
        documents = [
            SourceDocument(key="a.txt", content=b"alpha", kind=ContentKind.TEXT),
            SourceDocument(key="b.txt", content=b"beta", kind=ContentKind.TEXT),
            SourceDocument(key="c.png", content=b"\x89PNG", kind=ContentKind.UNSUPPORTED),
            SourceDocument(key="d.txt", content=b"delta", kind=ContentKind.TEXT),
        ]

        results = await ingestion_pipeline.ingest_batch(documents)

        assert [result.document_key for result in results] == ["a.txt", "b.txt", "c.png", "d.txt"]
        assert [result.state for result in results] == [
            DocumentState.COMPLETED,
            DocumentState.FAILED,
            DocumentState.SKIPPED,
            DocumentState.COMPLETED,
        ]
        mock_index_manager.ensure_index.assert_awaited_once()
