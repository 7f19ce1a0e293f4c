"""
Bedrock boundary modules.

Exports: BedrockEmbeddingClient, BedrockGenerationClient, build_bedrock_runtime_client
"""

from .embedding_client import BedrockEmbeddingClient
from .generation_client import BedrockGenerationClient
from .runtime import build_bedrock_runtime_client

__all__ = [
    "BedrockEmbeddingClient",
    "BedrockGenerationClient",
    "build_bedrock_runtime_client",
]
