"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI and the Lambda handlers.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from rag_service.configs.base import BaseSettings
from rag_service.configs.bedrock import BedrockSettings
from rag_service.configs.s3_documents import DocumentsSettings
from rag_service.configs.vector_store import OpenSearchSettings
from rag_service.core.document_processing.configs import DocumentPipelineSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    aws_region: str = Field(default="us-east-1", description="AWS region for all clients")

    # Aggregated settings
    opensearch: OpenSearchSettings = Field(default_factory=OpenSearchSettings)
    bedrock: BedrockSettings = Field(default_factory=BedrockSettings)
    documents: DocumentsSettings = Field(default_factory=DocumentsSettings)
    pipeline: DocumentPipelineSettings = Field(default_factory=DocumentPipelineSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from rag_service.configs import get_settings
        settings = get_settings()
    """
    return Settings()
