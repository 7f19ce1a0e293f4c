"""
Bedrock generation client.

Sends a model-specific request body to a Bedrock text model and returns the
decoded JSON response. Request shaping and answer extraction live in the
model adapters.

Dependencies: boto3, botocore
System role: Generative model transport for answer synthesis
"""

import asyncio
import json
import logging
from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    ReadTimeoutError,
)

from rag_service.core.exceptions import GenerationError, GenerationTimeoutError

logger = logging.getLogger(__name__)


class BedrockGenerationClient:
    """Invoke a Bedrock generative model with a prepared request body."""

    def __init__(self, runtime_client, model_id: str) -> None:
        self._client = runtime_client
        self.model_id = model_id

    def _invoke_sync(self, body: dict[str, Any]) -> bytes:
        response = self._client.invoke_model(
            modelId=self.model_id,
            contentType="application/json",
            accept="application/json",
            body=json.dumps(body),
        )
        return response["body"].read()

    async def invoke(self, body: dict[str, Any]) -> dict[str, Any]:
        """
        Invoke the model once.

        Args:
            body: Model-family specific request body

        Returns:
            dict: Decoded response body

        Raises:
            GenerationTimeoutError: When the call exceeds its timeout
            GenerationError: When the call fails or the response is not a JSON object
        """
        try:
            raw = await asyncio.to_thread(self._invoke_sync, body)
        except (ReadTimeoutError, ConnectTimeoutError) as e:
            raise GenerationTimeoutError(
                "Generation request timed out",
                details={"model_id": self.model_id},
            ) from e
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            raise GenerationError(
                f"Generative model rejected the request: {error_code}",
                details={"model_id": self.model_id},
            ) from e
        except BotoCoreError as e:
            raise GenerationError(
                f"Generative model unavailable: {e}",
                details={"model_id": self.model_id},
            ) from e

        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise GenerationError(
                "Generative model returned invalid JSON",
                details={"model_id": self.model_id},
            ) from e
        if not isinstance(payload, dict):
            raise GenerationError(
                "Generative model returned an unexpected payload",
                details={"model_id": self.model_id},
            )

        logger.debug(
            f"{__name__}:invoke - Model response received",
            extra={"model_id": self.model_id, "keys": list(payload.keys())},
        )
        return payload
