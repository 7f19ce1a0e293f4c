"""
Startup configuration validation for Lambda handlers and the HTTP app.
"""

import logging

from rag_service.configs.settings import Settings
from rag_service.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def validate_environment(settings: Settings, require_documents_bucket: bool = False) -> Settings:
    """
    Fail fast when required settings are missing.

    Args:
        settings: Loaded application settings
        require_documents_bucket: Whether the documents bucket is required (ingestion)

    Returns:
        Settings: The validated settings

    Raises:
        ConfigurationError: Naming every missing environment variable
    """
    required = {
        "OPENSEARCH_COLLECTION_ENDPOINT": settings.opensearch.collection_endpoint,
        "OPENSEARCH_INDEX_NAME": settings.opensearch.index_name,
        "BEDROCK_EMBEDDING_MODEL_ID": settings.bedrock.embedding_model_id,
        "BEDROCK_LLM_MODEL_ID": settings.bedrock.llm_model_id,
    }
    if require_documents_bucket:
        required["DOCUMENTS_BUCKET_NAME"] = settings.documents.bucket_name

    missing = [name for name, value in required.items() if not value or not value.strip()]
    if missing:
        raise ConfigurationError(
            f"Missing required environment variables: {', '.join(missing)}",
            details={"missing": missing},
        )

    logger.info("validate_environment - Environment validated")
    return settings
