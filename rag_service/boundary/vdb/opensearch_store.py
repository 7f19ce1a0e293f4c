"""
OpenSearch vector store.

Writes indexed entries and runs approximate k-NN search against a single
index. Search returns only text and source fields, never the stored vectors.

Dependencies: opensearch-py
System role: Vector storage and retrieval for the RAG pipeline
"""

import asyncio
import logging
from typing import Any

from opensearchpy import OpenSearch
from opensearchpy.exceptions import OpenSearchException

from rag_service.core.exceptions import VectorStoreError

from .vector_schemas import IndexedEntry, IndexSchema, SearchHit

logger = logging.getLogger(__name__)


class OpenSearchVectorStore:
    """Entry writes and k-NN search over one OpenSearch index."""

    def __init__(
        self,
        client: OpenSearch,
        index_name: str,
        schema: IndexSchema,
        refresh_on_write: bool = True,
    ) -> None:
        """
        Initialize vector store.

        Args:
            client: Shared OpenSearch client
            index_name: Target index
            schema: Field names used for documents and queries
            refresh_on_write: Make each write searchable before it returns
        """
        self._client = client
        self.index_name = index_name
        self._schema = schema
        self._refresh_on_write = refresh_on_write

    def _document_body(self, entry: IndexedEntry) -> dict[str, Any]:
        return {
            self._schema.vector_field: entry.vector,
            self._schema.text_field: entry.text,
            self._schema.source_field: entry.source_document_key,
        }

    def build_search_body(self, vector: list[float], k: int) -> dict[str, Any]:
        """
        Build a k-NN query restricted to the vector field.

        Args:
            vector: Query embedding
            k: Number of neighbors

        Returns:
            dict: Search request body
        """
        return {
            "size": k,
            "_source": [self._schema.text_field, self._schema.source_field],
            "query": {
                "knn": {
                    self._schema.vector_field: {
                        "vector": vector,
                        "k": k,
                    }
                }
            },
        }

    async def write_entry(self, entry: IndexedEntry) -> None:
        """
        Upsert an entry under its deterministic ID.

        Args:
            entry: Entry to write

        Raises:
            VectorStoreError: When the write fails
        """
        kwargs: dict[str, Any] = {
            "index": self.index_name,
            "id": entry.entry_id,
            "body": self._document_body(entry),
        }
        if self._refresh_on_write:
            kwargs["refresh"] = True

        try:
            await asyncio.to_thread(self._client.index, **kwargs)
        except OpenSearchException as e:
            raise VectorStoreError(
                f"Failed to index entry: {e}",
                operation="index",
                details={"entry_id": entry.entry_id, "index": self.index_name},
            ) from e

    async def knn_search(self, vector: list[float], k: int) -> list[SearchHit]:
        """
        Run approximate k-NN search.

        Args:
            vector: Query embedding
            k: Number of neighbors to request

        Returns:
            list[SearchHit]: Hits in engine order (descending score), possibly empty

        Raises:
            VectorStoreError: When the search fails
        """
        body = self.build_search_body(vector, k)
        try:
            response = await asyncio.to_thread(
                self._client.search, index=self.index_name, body=body
            )
        except OpenSearchException as e:
            raise VectorStoreError(
                f"k-NN search failed: {e}",
                operation="search",
                details={"index": self.index_name, "k": k},
            ) from e

        hits = response.get("hits", {}).get("hits", []) if isinstance(response, dict) else []
        results = []
        for hit in hits:
            source = hit.get("_source") or {}
            results.append(
                SearchHit(
                    text=source.get(self._schema.text_field, ""),
                    source_document_key=source.get(self._schema.source_field, ""),
                    score=float(hit.get("_score") or 0.0),
                )
            )

        logger.info(
            f"{__name__}:knn_search - Found {len(results)} results",
            extra={"index": self.index_name, "k": k},
        )
        return results
