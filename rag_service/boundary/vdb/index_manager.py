"""
Vector index bootstrap.

Ensures the k-NN index exists with the expected schema before any write.
Safe to call before every ingestion batch; a concurrent creator winning the
race counts as success.

Dependencies: opensearch-py
System role: Index lifecycle for the ingestion pipeline
"""

import asyncio
import logging
from typing import Any

from opensearchpy import OpenSearch
from opensearchpy.exceptions import OpenSearchException, TransportError

from rag_service.core.exceptions import IndexBootstrapError

from .vector_schemas import IndexSchema

logger = logging.getLogger(__name__)

ALREADY_EXISTS_ERROR = "resource_already_exists_exception"


def build_index_body(schema: IndexSchema) -> dict[str, Any]:
    """
    Build the index creation body for a k-NN index.

    Args:
        schema: Field names, dimension and HNSW parameters

    Returns:
        dict: Settings and mappings for indices.create
    """
    return {
        "settings": {
            "index.knn": True,
            "index.knn.algo_param.ef_search": schema.ef_search,
        },
        "mappings": {
            "properties": {
                schema.vector_field: {
                    "type": "knn_vector",
                    "dimension": schema.dimension,
                    "method": {
                        "name": "hnsw",
                        "space_type": schema.space_type,
                        "engine": schema.engine,
                        "parameters": {
                            "ef_construction": schema.ef_construction,
                            "m": schema.m,
                        },
                    },
                },
                schema.text_field: {"type": "text"},
                schema.source_field: {"type": "keyword"},
            }
        },
    }


def _is_already_exists(error: TransportError) -> bool:
    if error.error == ALREADY_EXISTS_ERROR:
        return True
    info = error.info
    if isinstance(info, dict) and isinstance(info.get("error"), dict):
        return info["error"].get("type") == ALREADY_EXISTS_ERROR
    return False


class IndexManager:
    """Create the vector index on demand."""

    def __init__(self, client: OpenSearch, schema: IndexSchema) -> None:
        self._client = client
        self._schema = schema

    def _ensure_index_sync(self, name: str, schema: IndexSchema) -> bool:
        if self._client.indices.exists(index=name):
            logger.info(f"{__name__}:ensure_index - Index already exists", extra={"index": name})
            return False

        logger.info(f"{__name__}:ensure_index - Creating index", extra={"index": name})
        try:
            self._client.indices.create(index=name, body=build_index_body(schema))
        except TransportError as e:
            if _is_already_exists(e):
                logger.info(
                    f"{__name__}:ensure_index - Index created concurrently",
                    extra={"index": name},
                )
                return False
            raise
        logger.info(f"{__name__}:ensure_index - Index created", extra={"index": name})
        return True

    async def ensure_index(self, name: str, embedding_dimension: int | None = None) -> bool:
        """
        Ensure the named index exists.

        Args:
            name: Index name
            embedding_dimension: Vector dimension; defaults to the configured schema

        Returns:
            bool: True when this call created the index

        Raises:
            IndexBootstrapError: When the existence check or creation fails for
                any reason other than a concurrent creation
        """
        schema = self._schema
        if embedding_dimension is not None and embedding_dimension != schema.dimension:
            schema = schema.model_copy(update={"dimension": embedding_dimension})

        try:
            return await asyncio.to_thread(self._ensure_index_sync, name, schema)
        except OpenSearchException as e:
            logger.error(
                f"{__name__}:ensure_index - Index bootstrap failed: {e}",
                extra={"index": name},
            )
            raise IndexBootstrapError(f"Failed to ensure index: {e}", index_name=name) from e
