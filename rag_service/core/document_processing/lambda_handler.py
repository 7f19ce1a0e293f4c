"""
Lambda handler for storage-triggered document ingestion.

Processes documents uploaded to the documents bucket through the ingestion
pipeline: fetch → extract → chunk → embed → index. Accepts direct S3
notifications and S3 notifications delivered through SQS.

Environment variables:
- DOCUMENTS_BUCKET_NAME: Bucket whose objects are ingested
- OPENSEARCH_COLLECTION_ENDPOINT: Collection endpoint host
- OPENSEARCH_INDEX_NAME: Target k-NN index
- BEDROCK_EMBEDDING_MODEL_ID / BEDROCK_LLM_MODEL_ID: Model identifiers
- AWS_REGION: AWS region
- LOG_LEVEL: Logging level

Dependencies: lambda_utils, application.service_container
System role: Lambda entry point for document ingestion
"""

import asyncio
import json
import logging
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from rag_service.application.ingestion_service import IngestionSummary
from rag_service.application.service_container import ServiceContainer
from rag_service.configs.settings import get_settings
from rag_service.core.exceptions import ConfigurationError, IndexBootstrapError
from rag_service.observability.correlation import clear_correlation_id, set_correlation_id
from rag_service.observability.logger import configure_logging

from .lambda_utils.config import validate_environment
from .lambda_utils.event_parser import parse_storage_event

logger = logging.getLogger(__name__)

_container: ServiceContainer | None = None


def _get_container() -> ServiceContainer:
    """Build the service container once per execution environment."""
    global _container
    if _container is None:
        settings = validate_environment(get_settings(), require_documents_bucket=True)
        configure_logging(settings.log_level)
        _container = ServiceContainer(settings)
    return _container


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {"statusCode": status_code, "body": json.dumps(body)}


def _summary_body(summary: IngestionSummary, unparseable: list[dict]) -> Dict[str, Any]:
    results = [result.model_dump(mode="json") for result in summary.results]
    results.extend({"state": "unparseable", **error} for error in unparseable)
    return {
        "processed": summary.processed,
        "failed": summary.failed + len(unparseable),
        "skipped": summary.skipped,
        "ignored": len(summary.ignored),
        "results": results,
    }


def process_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for document ingestion events.

    Documents are processed sequentially. A failing document is recorded and
    the batch continues; configuration and index bootstrap errors abort it.

    Args:
        event: S3 or SQS event with a Records array
        context: Lambda context object

    Returns:
        Dict with statusCode (200 all succeeded, 206 partial failure, 500 aborted) and body
    """
    set_correlation_id(getattr(context, "aws_request_id", None))
    try:
        logger.info(
            "%s:process_handler - Received event",
            __name__,
            extra={"record_count": len(event.get("Records") or [])},
        )

        try:
            container = _get_container()
        except ConfigurationError as e:
            logger.error("%s:process_handler - ConfigurationError: %s", __name__, e)
            return _response(500, {"error": e.message, "results": []})

        parsed = parse_storage_event(event)
        unparseable = [error.model_dump() for error in parsed.errors]

        try:
            summary = asyncio.run(
                container.ingestion_service.handle_notifications(parsed.locations)
            )
        except (ConfigurationError, IndexBootstrapError) as e:
            logger.error("%s:process_handler - %s: %s", __name__, type(e).__name__, e)
            return _response(500, {"error": e.message, "results": []})

        body = _summary_body(summary, unparseable)
        status_code = 200 if body["failed"] == 0 else 206
        logger.info(
            "%s:process_handler - Processing complete",
            __name__,
            extra={
                "processed": body["processed"],
                "failed": body["failed"],
                "skipped": body["skipped"],
                "ignored": body["ignored"],
            },
        )
        return _response(status_code, body)
    finally:
        clear_correlation_id()
