"""
Lambda handler for RAG queries behind an API Gateway HTTP API.

Request body: {"query": "...", "topK": 3}
Response body: {"answer": "...", "sources": [{"s3_key": "...", "score": 0.87}]}

Dependencies: application.service_container, python-dotenv
System role: Lambda entry point for question answering
"""

import asyncio
import base64
import binascii
import json
import logging
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

from rag_service.application.service_container import ServiceContainer
from rag_service.configs.settings import get_settings
from rag_service.core.document_processing.lambda_utils.config import validate_environment
from rag_service.core.exceptions import ConfigurationError
from rag_service.observability.correlation import clear_correlation_id, set_correlation_id
from rag_service.observability.logger import configure_logging

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}

_container: ServiceContainer | None = None


def _get_container() -> ServiceContainer:
    """Build the service container once per execution environment."""
    global _container
    if _container is None:
        settings = validate_environment(get_settings())
        configure_logging(settings.log_level)
        container = ServiceContainer(settings)
        # Resolve the model family and build the remote clients at cold start.
        _ = container.query_service
        _container = container
    return _container


def _response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {"statusCode": status_code, "headers": JSON_HEADERS, "body": json.dumps(payload)}


def extract_body(event: Dict[str, Any]) -> str | None:
    """
    Return the raw request body, decoding base64 bodies.

    Args:
        event: API Gateway HTTP API (v2) event

    Returns:
        str | None: Body text, or None when absent or undecodable
    """
    body = event.get("body")
    if body is None:
        return None
    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body).decode("utf-8", errors="replace")
        except (binascii.Error, ValueError):
            return None
    return body


def query_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Answer a question from the indexed documents.

    Args:
        event: API Gateway HTTP API (v2) event
        context: Lambda context object

    Returns:
        Dict with statusCode (200, 400 or 500), JSON headers and body
    """
    set_correlation_id(getattr(context, "aws_request_id", None))
    try:
        try:
            container = _get_container()
            query_service = container.query_service
        except ConfigurationError as e:
            logger.error("%s:query_handler - ConfigurationError: %s", __name__, e)
            return _response(500, {"message": "Internal server error", "error": e.message})

        status_code, payload = asyncio.run(query_service.handle(extract_body(event)))
        logger.info(
            "%s:query_handler - Query handled",
            __name__,
            extra={"status_code": status_code},
        )
        return _response(status_code, payload)
    finally:
        clear_correlation_id()
