"""
Bedrock embedding client.

Converts text into a fixed-length vector using a Bedrock embedding model.
Each call is a single attempt; failures are classified so callers can tell an
unreachable service from a malformed answer.

Dependencies: boto3, botocore
System role: Embedding provider for ingestion and retrieval
"""

import asyncio
import json
import logging
from numbers import Real

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    ReadTimeoutError,
)

from rag_service.core.exceptions import (
    EmbeddingDimensionError,
    EmbeddingFormatError,
    EmbeddingServiceError,
    EmbeddingTimeoutError,
)

logger = logging.getLogger(__name__)


class BedrockEmbeddingClient:
    """Embed text with a Bedrock embedding model."""

    def __init__(self, runtime_client, model_id: str, dimension: int) -> None:
        """
        Initialize embedding client.

        Args:
            runtime_client: boto3 bedrock-runtime client
            model_id: Embedding model identifier
            dimension: Expected vector length; must match the index dimension
        """
        self._client = runtime_client
        self.model_id = model_id
        self.dimension = dimension

    def _invoke_sync(self, text: str) -> bytes:
        response = self._client.invoke_model(
            modelId=self.model_id,
            contentType="application/json",
            accept="application/json",
            body=json.dumps({"inputText": text}),
        )
        return response["body"].read()

    async def embed(self, text: str) -> list[float]:
        """
        Embed a single text.

        Args:
            text: Text to embed

        Returns:
            list[float]: Embedding vector of the configured dimension

        Raises:
            EmbeddingTimeoutError: When the call exceeds its timeout
            EmbeddingServiceError: When the service is unreachable or rejects the call
            EmbeddingFormatError: When the response has no numeric embedding
            EmbeddingDimensionError: When the vector length differs from the configured dimension
        """
        try:
            raw = await asyncio.to_thread(self._invoke_sync, text)
        except (ReadTimeoutError, ConnectTimeoutError) as e:
            raise EmbeddingTimeoutError(
                "Embedding request timed out",
                details={"model_id": self.model_id},
            ) from e
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            raise EmbeddingServiceError(
                f"Embedding model rejected the request: {error_code}",
                details={"model_id": self.model_id},
            ) from e
        except BotoCoreError as e:
            raise EmbeddingServiceError(
                f"Embedding service unavailable: {e}",
                details={"model_id": self.model_id},
            ) from e

        vector = self._parse_embedding(raw)
        if len(vector) != self.dimension:
            raise EmbeddingDimensionError(self.dimension, len(vector), self.model_id)
        return vector

    def _parse_embedding(self, raw: bytes) -> list[float]:
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise EmbeddingFormatError(
                "Embedding response is not valid JSON",
                details={"model_id": self.model_id},
            ) from e

        embedding = payload.get("embedding") if isinstance(payload, dict) else None
        if not isinstance(embedding, list) or not embedding:
            logger.error(
                f"{__name__}:embed - Unexpected embedding response format",
                extra={"model_id": self.model_id},
            )
            raise EmbeddingFormatError(
                "Failed to get embedding or embedding format is incorrect",
                details={"model_id": self.model_id},
            )
        if not all(isinstance(v, Real) and not isinstance(v, bool) for v in embedding):
            raise EmbeddingFormatError(
                "Embedding contains non-numeric values",
                details={"model_id": self.model_id},
            )
        return [float(v) for v in embedding]
