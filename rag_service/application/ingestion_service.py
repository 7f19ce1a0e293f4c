"""
Storage-triggered ingestion.

Turns object-created notifications into ingestion results: filters by the
configured documents bucket, fetches each object and runs the batch through
the ingestion pipeline.

Dependencies: rag_service.core.document_processing, rag_service.boundary.aws
System role: Ingestion use case orchestration
"""

import logging

from pydantic import BaseModel, Field

from rag_service.core.document_processing.entrypoint import IngestionPipeline
from rag_service.core.document_processing.models import (
    DocumentLocation,
    DocumentState,
    IngestionResult,
)
from rag_service.core.document_processing.tasks import S3DownloadTask
from rag_service.core.exceptions import DocumentFetchError
from rag_service.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class IngestionSummary(BaseModel):
    """Outcome of one notification batch."""

    results: list[IngestionResult] = Field(default_factory=list)
    ignored: list[str] = Field(default_factory=list, description="Keys from other buckets")

    def count(self, state: DocumentState) -> int:
        return sum(1 for result in self.results if result.state == state)

    @property
    def processed(self) -> int:
        return self.count(DocumentState.COMPLETED)

    @property
    def failed(self) -> int:
        return self.count(DocumentState.FAILED)

    @property
    def skipped(self) -> int:
        return self.count(DocumentState.SKIPPED)


class StorageIngestionService:
    """Ingest documents referenced by storage notifications."""

    def __init__(
        self,
        pipeline: IngestionPipeline,
        download_task: S3DownloadTask,
        documents_bucket: str,
    ) -> None:
        self._pipeline = pipeline
        self._download_task = download_task
        self.documents_bucket = documents_bucket

    async def handle_notifications(self, locations: list[DocumentLocation]) -> IngestionSummary:
        """
        Fetch and ingest every object from the documents bucket.

        Objects are fetched and ingested one at a time after a single index
        bootstrap. A fetch failure marks that document Failed; the batch
        continues.

        Args:
            locations: Parsed notification locations

        Returns:
            IngestionSummary: Per-document results and ignored keys

        Raises:
            IndexBootstrapError: When the index cannot be bootstrapped
            ConfigurationError: When embeddings do not match the index dimension
        """
        summary = IngestionSummary()
        accepted = []
        for location in locations:
            if location.bucket != self.documents_bucket:
                logger.warning(
                    f"{__name__}:handle_notifications - Skipping record from unexpected bucket",
                    extra={"bucket": location.bucket, "document_key": location.key},
                )
                summary.ignored.append(location.key)
                continue
            accepted.append(location)

        if not accepted:
            return summary

        await self._pipeline.ensure_index()
        for location in accepted:
            try:
                document = await self._download_task.download(location)
            except DocumentFetchError as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:handle_notifications - Document fetch failed",
                    e,
                    document_key=location.key,
                    state=DocumentState.FAILED.value,
                )
                summary.results.append(
                    IngestionResult(
                        document_key=location.key,
                        state=DocumentState.FAILED,
                        reason=str(e),
                    )
                )
                continue

            summary.results.append(await self._pipeline.ingest_document(document))

        return summary

    async def ingest_key(self, key: str) -> IngestionResult:
        """
        Ingest a single object from the documents bucket on demand.

        Args:
            key: Object key in the documents bucket

        Returns:
            IngestionResult: Terminal state of the document
        """
        summary = await self.handle_notifications(
            [DocumentLocation(bucket=self.documents_bucket, key=key)]
        )
        return summary.results[0]
