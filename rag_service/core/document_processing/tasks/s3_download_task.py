"""
S3 document fetch task.

Reads a document's raw bytes from the configured documents bucket.

Dependencies: rag_service.boundary.aws.s3_client
System role: Source stage of storage-triggered ingestion
"""

from rag_service.boundary.aws.s3_client import S3DocumentClient
from rag_service.core.exceptions import DocumentFetchError

from ..models import ContentKind, DocumentLocation, SourceDocument


class S3DownloadTask:
    """Fetch documents from S3 into memory as SourceDocument models."""

    def __init__(self, s3_client: S3DocumentClient) -> None:
        self._s3_client = s3_client

    async def download(self, location: DocumentLocation) -> SourceDocument:
        """
        Fetch the object referenced by a storage notification.

        Args:
            location: Bucket and decoded key of the object

        Returns:
            SourceDocument: Raw bytes with inferred content kind

        Raises:
            DocumentFetchError: When the object cannot be read
        """
        if not location.key:
            raise DocumentFetchError("S3 key is required")

        content = await self._s3_client.get_object_bytes(location.bucket, location.key)
        return SourceDocument(
            key=location.key,
            content=content,
            kind=ContentKind.from_key(location.key),
        )
