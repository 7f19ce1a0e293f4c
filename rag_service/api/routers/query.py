"""
Query API endpoint.

Routes: POST /query

Reads the raw body so that malformed requests get the same 400 messages as
the query Lambda rather than FastAPI's validation errors.

Dependencies: rag_service.application.query_service
System role: Question answering HTTP API
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from rag_service.api.deps import get_query_service
from rag_service.application.query_service import QueryService
from rag_service.models.query import ErrorResponse, QueryRequest, QueryResponse, ServerErrorResponse

router = APIRouter(tags=["query"])


@router.post(
    "/query",
    response_model=QueryResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ServerErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": QueryRequest.model_json_schema()}},
        }
    },
)
async def query(
    request: Request,
    query_service: QueryService = Depends(get_query_service),
) -> JSONResponse:
    """
    Answer a question from the indexed documents.

    Args:
        request: Raw HTTP request carrying {"query": str, "topK": int?}
        query_service: Injected query service

    Returns:
        JSONResponse: 200 answer, 400 invalid input, 500 internal failure
    """
    body = await request.body()
    status_code, payload = await query_service.handle(body)
    return JSONResponse(status_code=status_code, content=payload)
