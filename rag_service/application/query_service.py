"""
Query request handling.

Parses a raw JSON request body, runs retrieval and synthesis, and maps every
outcome to an HTTP status and payload. Shared by the query Lambda and the
FastAPI route.

Dependencies: rag_service.core.rag_query
System role: Query use case orchestration
"""

import json
import logging
from typing import Any

from rag_service.core.exceptions import InvalidQueryError, RAGServiceException
from rag_service.core.rag_query.retriever import RetrievalPipeline
from rag_service.core.rag_query.synthesizer import AnswerSynthesizer
from rag_service.models.query import ErrorResponse, QueryRequest, QueryResponse, ServerErrorResponse
from rag_service.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

MISSING_BODY = "Missing request body"
INVALID_JSON = "Invalid JSON in request body"
INVALID_QUERY = 'Missing or invalid "query" in request body'


def parse_query_body(raw_body: str | bytes | None) -> QueryRequest:
    """
    Parse and validate a query request body.

    Args:
        raw_body: Raw request body

    Returns:
        QueryRequest: Query text and optional topK

    Raises:
        InvalidQueryError: When the body is missing, not a JSON object, or has no usable query
    """
    if raw_body is None:
        raise InvalidQueryError(MISSING_BODY, field="body")
    if isinstance(raw_body, (bytes, bytearray)):
        raw_body = raw_body.decode("utf-8", errors="replace")
    if not raw_body.strip():
        raise InvalidQueryError(MISSING_BODY, field="body")

    try:
        payload = json.loads(raw_body)
    except json.JSONDecodeError as e:
        raise InvalidQueryError(INVALID_JSON, field="body") from e
    if not isinstance(payload, dict):
        raise InvalidQueryError(INVALID_JSON, field="body")

    query = payload.get("query")
    if not isinstance(query, str) or not query.strip():
        raise InvalidQueryError(INVALID_QUERY, field="query")

    top_k = payload.get("topK")
    if top_k is not None and (isinstance(top_k, bool) or not isinstance(top_k, int) or top_k <= 0):
        raise InvalidQueryError('"topK" must be a positive integer', field="topK")

    return QueryRequest(query=query, topK=top_k)


class QueryService:
    """Answer questions over the indexed documents."""

    def __init__(self, retriever: RetrievalPipeline, synthesizer: AnswerSynthesizer) -> None:
        self._retriever = retriever
        self._synthesizer = synthesizer

    async def answer(self, request: QueryRequest) -> QueryResponse:
        """
        Retrieve context and synthesize an answer.

        Args:
            request: Validated query request

        Returns:
            QueryResponse: Answer and ranked sources

        Raises:
            InvalidQueryError: When topK is invalid
            RAGServiceException: When embedding, search or generation fails
        """
        retrieval = await self._retriever.retrieve(request.query, request.topK)
        answer = await self._synthesizer.synthesize(request.query, retrieval)
        return QueryResponse.model_validate(answer.model_dump())

    async def handle(self, raw_body: str | bytes | None) -> tuple[int, dict[str, Any]]:
        """
        Handle a raw query request end to end.

        Args:
            raw_body: Raw JSON request body

        Returns:
            tuple[int, dict]: HTTP status code and response payload
        """
        try:
            request = parse_query_body(raw_body)
            response = await self.answer(request)
        except InvalidQueryError as e:
            logger.info(
                f"{__name__}:handle - Rejected query: {e.message}",
                extra={"field": e.details.get("field")},
            )
            return 400, ErrorResponse(message=e.message).model_dump()
        except Exception as e:
            log_exception_with_context(logger, f"{__name__}:handle - Query failed", e)
            error = e.message if isinstance(e, RAGServiceException) else str(e)
            return 500, ServerErrorResponse(
                message="Internal server error",
                error=error,
            ).model_dump()

        return 200, response.model_dump()
