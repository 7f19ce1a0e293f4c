"""
Bedrock model configuration settings.

Embedding and generation model identifiers, sampling parameters and
per-call timeouts.

Dependencies: pydantic, pydantic_settings
System role: Model configuration for embedding and answer generation
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ModelFamily = Literal[
    "auto",
    "anthropic-text",
    "anthropic-messages",
    "cohere",
    "titan",
    "meta",
]


class BedrockSettings(BaseSettings):
    """Amazon Bedrock runtime configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BEDROCK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    embedding_model_id: str = Field(
        default="amazon.titan-embed-text-v1",
        description="Bedrock embedding model ID (Titan G1 text = 1536 dimensions)",
    )
    llm_model_id: str = Field(
        default="anthropic.claude-3-sonnet-20240229-v1:0",
        description="Bedrock generation model ID",
    )
    llm_model_family: ModelFamily = Field(
        default="auto",
        description="Request/response shape of the generation model; 'auto' infers it from the model ID",
    )

    max_tokens: int = Field(default=500, gt=0, description="Maximum tokens to generate")
    temperature: float = Field(default=0.7, ge=0.0, le=1.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)

    connect_timeout: int = Field(default=10, gt=0, description="Connect timeout in seconds")
    read_timeout: int = Field(default=60, gt=0, description="Read timeout in seconds")
