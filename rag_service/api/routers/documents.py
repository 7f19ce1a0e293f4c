"""
Document ingestion API endpoint.

Routes: POST /documents/ingest

Ingests an object that already exists in the documents bucket, outside the
storage trigger. Useful for re-indexing after a schema or model change.

Dependencies: rag_service.application.ingestion_service
System role: On-demand ingestion HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from rag_service.api.deps import get_ingestion_service
from rag_service.application.ingestion_service import StorageIngestionService
from rag_service.core.document_processing.models import IngestionResult
from rag_service.core.exceptions import ConfigurationError, IndexBootstrapError
from rag_service.models.query import IngestRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/ingest", response_model=IngestionResult)
async def ingest_document(
    request: IngestRequest,
    ingestion_service: StorageIngestionService = Depends(get_ingestion_service),
) -> IngestionResult:
    """
    Ingest one document from the documents bucket.

    Args:
        request: Object key to ingest
        ingestion_service: Injected ingestion service

    Returns:
        IngestionResult: Terminal state (completed, skipped or failed)

    Raises:
        HTTPException: 503 when the index cannot be bootstrapped, 500 on configuration errors
    """
    try:
        return await ingestion_service.ingest_key(request.s3_key)
    except IndexBootstrapError as e:
        logger.error(f"{__name__}:ingest_document - IndexBootstrapError: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        ) from e
    except ConfigurationError as e:
        logger.error(f"{__name__}:ingest_document - ConfigurationError: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e
