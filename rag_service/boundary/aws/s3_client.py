"""
S3 client for document bucket operations.

Reads raw document bytes for storage-triggered ingestion.

Dependencies: boto3
System role: Object storage access for the ingestion pipeline
"""

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rag_service.core.exceptions import DocumentFetchError

logger = logging.getLogger(__name__)


class S3DocumentClient:
    """S3 client for reading uploaded documents."""

    def __init__(self, region: str = "us-east-1", client=None) -> None:
        """
        Initialize S3 client.

        Args:
            region: AWS region for the documents bucket
            client: Optional pre-built boto3 S3 client
        """
        self._region = region
        self._s3_client = client or boto3.client("s3", region_name=region)

    def _get_object_sync(self, bucket: str, key: str) -> bytes:
        response = self._s3_client.get_object(Bucket=bucket, Key=key)
        return response["Body"].read()

    async def get_object_bytes(self, bucket: str, key: str) -> bytes:
        """
        Read an object's full content.

        Args:
            bucket: Bucket name
            key: Decoded object key

        Returns:
            bytes: Object body

        Raises:
            DocumentFetchError: When the object is missing or unreadable
        """
        try:
            return await asyncio.to_thread(self._get_object_sync, bucket, key)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            if error_code in ("404", "NoSuchKey"):
                raise DocumentFetchError(
                    f"File not found in S3: {key}",
                    document_key=key,
                    details={"bucket": bucket},
                ) from e
            raise DocumentFetchError(
                f"Failed to download from S3: {error_code}",
                document_key=key,
                details={"bucket": bucket},
            ) from e
        except BotoCoreError as e:
            raise DocumentFetchError(
                f"Failed to download from S3: {e}",
                document_key=key,
                details={"bucket": bucket},
            ) from e
