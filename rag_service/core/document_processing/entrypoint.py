"""
Document ingestion pipeline orchestrator.

Coordinates text extraction, chunking, embedding and index writes for one
document or a batch. Per-document errors end in a Failed result and never
abort the batch; configuration and index bootstrap errors do.

Dependencies: All task modules, boundary clients
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from rag_service.boundary.bedrock.embedding_client import BedrockEmbeddingClient
from rag_service.boundary.vdb.index_manager import IndexManager
from rag_service.boundary.vdb.opensearch_store import OpenSearchVectorStore
from rag_service.core.exceptions import (
    ConfigurationError,
    EmptyContentError,
    IndexBootstrapError,
    RAGServiceException,
    UnsupportedContentError,
)
from rag_service.observability.log_utils import log_exception_with_context, log_with_context

from .configs import DocumentPipelineSettings, get_pipeline_settings
from .models import ContentKind, DocumentState, IngestionResult, SourceDocument
from .tasks import ChunkingTask, IndexingTask, TextExtractionTask, TextExtractor

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class IngestionPipeline:
    """Orchestrate document ingestion: extract -> chunk -> embed -> index."""

    def __init__(
        self,
        embedding_client: BedrockEmbeddingClient,
        index_manager: IndexManager,
        vector_store: OpenSearchVectorStore,
        settings: DocumentPipelineSettings | None = None,
        pdf_extractor: TextExtractor | None = None,
    ) -> None:
        """
        Initialize pipeline with its collaborators.

        Args:
            embedding_client: Embedding provider for chunk text
            index_manager: Index bootstrap
            vector_store: Target index for entry writes
            settings: Chunking settings (uses defaults if None)
            pdf_extractor: Optional PDF text extractor override
        """
        self._settings = settings or get_pipeline_settings()
        self._embedding_client = embedding_client
        self._index_manager = index_manager
        self._vector_store = vector_store

        self._extraction_task = TextExtractionTask(pdf_extractor=pdf_extractor)
        self._chunking_task = ChunkingTask(
            chunk_size=self._settings.chunk_size,
            chunk_overlap=self._settings.chunk_overlap,
        )
        self._indexing_task = IndexingTask(embedding_client, vector_store)

    async def ensure_index(self) -> None:
        """
        Bootstrap the target index.

        Raises:
            IndexBootstrapError: When the index cannot be verified or created
        """
        await self._index_manager.ensure_index(
            self._vector_store.index_name,
            self._embedding_client.dimension,
        )

    async def ingest(
        self,
        document_key: str,
        raw_content: bytes,
        content_kind: ContentKind | None = None,
    ) -> IngestionResult:
        """
        Ingest one document, bootstrapping the index first.

        Args:
            document_key: Storage key; parent identity of every chunk
            raw_content: Raw document bytes
            content_kind: Content kind; inferred from the key when None

        Returns:
            IngestionResult: Terminal state and indexed entry IDs

        Raises:
            IndexBootstrapError: When the index cannot be bootstrapped
            ConfigurationError: When embeddings do not match the index dimension
        """
        await self.ensure_index()
        kind = content_kind or ContentKind.from_key(document_key)
        return await self.ingest_document(
            SourceDocument(key=document_key, content=raw_content, kind=kind)
        )

    async def ingest_batch(self, documents: list[SourceDocument]) -> list[IngestionResult]:
        """
        Ingest documents sequentially after a single index bootstrap.

        Args:
            documents: Documents to ingest, in order

        Returns:
            list[IngestionResult]: One result per document, in input order

        Raises:
            IndexBootstrapError: When the index cannot be bootstrapped
            ConfigurationError: When embeddings do not match the index dimension
        """
        await self.ensure_index()
        results = []
        for document in documents:
            results.append(await self.ingest_document(document))
        return results

    async def ingest_document(self, document: SourceDocument) -> IngestionResult:
        """
        Ingest one document into an already bootstrapped index.

        Args:
            document: Raw document with its content kind

        Returns:
            IngestionResult: Completed, Skipped or Failed result

        Raises:
            ConfigurationError: When embeddings do not match the index dimension
        """
        start = time.perf_counter()
        key = document.key
        indexed_ids: list[str] = []
        chunk_count = 0
        self._log_state(key, DocumentState.RECEIVED, kind=document.kind.value)

        try:
            text = self._extraction_task.extract(document.content, document.kind, key)
            self._log_state(key, DocumentState.TEXT_EXTRACTED, length=len(text))

            chunks = self._chunking_task.chunk(text, key)
            chunk_count = len(chunks)
            self._log_state(key, DocumentState.CHUNKED, chunk_count=chunk_count)
            if not chunks:
                raise EmptyContentError("Document produced no non-empty chunks", document_key=key)

            await self._indexing_task.index_chunks(chunks, indexed_ids)

        except (UnsupportedContentError, EmptyContentError) as e:
            logger.warning(
                f"{__name__}:ingest - Skipping document: {e.message}",
                extra={"document_key": key, "state": DocumentState.SKIPPED.value},
            )
            return IngestionResult(
                document_key=key,
                state=DocumentState.SKIPPED,
                chunk_count=chunk_count,
                reason=e.message,
                processing_time_ms=_elapsed_ms(start),
            )
        except (ConfigurationError, IndexBootstrapError):
            raise
        except RAGServiceException as e:
            log_exception_with_context(
                logger,
                f"{__name__}:ingest - Document failed",
                e,
                document_key=key,
                state=DocumentState.FAILED.value,
                indexed=len(indexed_ids),
            )
            return IngestionResult(
                document_key=key,
                state=DocumentState.FAILED,
                chunk_count=chunk_count,
                indexed_ids=indexed_ids,
                reason=str(e),
                processing_time_ms=_elapsed_ms(start),
            )

        result = IngestionResult(
            document_key=key,
            state=DocumentState.COMPLETED,
            chunk_count=chunk_count,
            indexed_ids=indexed_ids,
            processing_time_ms=_elapsed_ms(start),
        )
        self._log_state(
            key,
            DocumentState.COMPLETED,
            chunk_count=chunk_count,
            processing_time_ms=result.processing_time_ms,
        )
        return result

    def _log_state(self, document_key: str, state: DocumentState, **context) -> None:
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ingest - Document {state.value}",
            document_key=document_key,
            state=state.value,
            **context,
        )
