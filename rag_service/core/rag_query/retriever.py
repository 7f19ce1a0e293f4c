"""
Retrieval pipeline.

Embeds the user query and runs k-NN search over the vector index. Results
keep the engine's native order; no re-ranking happens here.

Dependencies: rag_service.boundary.bedrock, rag_service.boundary.vdb
System role: RAG retrieval business logic
"""

import logging

from rag_service.boundary.bedrock.embedding_client import BedrockEmbeddingClient
from rag_service.boundary.vdb.opensearch_store import OpenSearchVectorStore
from rag_service.core.exceptions import InvalidQueryError

from .models import RetrievalResult, RetrievedChunk

logger = logging.getLogger(__name__)


class RetrievalPipeline:
    """Turn a query into ranked context chunks with provenance."""

    def __init__(
        self,
        embedding_client: BedrockEmbeddingClient,
        vector_store: OpenSearchVectorStore,
        default_top_k: int = 3,
        max_top_k: int = 100,
    ) -> None:
        self._embedding_client = embedding_client
        self._vector_store = vector_store
        self.default_top_k = default_top_k
        self.max_top_k = max_top_k

    def resolve_top_k(self, top_k: object) -> int:
        """
        Validate the requested result count.

        Args:
            top_k: Requested count; None means the default

        Returns:
            int: Validated count

        Raises:
            InvalidQueryError: When top_k is not an integer in [1, max_top_k]
        """
        if top_k is None:
            return self.default_top_k
        if isinstance(top_k, bool) or not isinstance(top_k, int):
            raise InvalidQueryError('"topK" must be a positive integer', field="topK")
        if top_k <= 0:
            raise InvalidQueryError('"topK" must be a positive integer', field="topK")
        if top_k > self.max_top_k:
            raise InvalidQueryError(
                f'"topK" must not exceed {self.max_top_k}',
                field="topK",
            )
        return top_k

    async def retrieve(self, query: str, top_k: int | None = None) -> RetrievalResult:
        """
        Retrieve the chunks most similar to a query.

        Args:
            query: User question
            top_k: Number of neighbors (defaults to the configured default)

        Returns:
            RetrievalResult: Ranked chunks, possibly empty

        Raises:
            InvalidQueryError: When the query is blank or top_k is invalid
            EmbeddingError: When the query cannot be embedded
            VectorStoreError: When the search fails
        """
        if not isinstance(query, str) or not query.strip():
            raise InvalidQueryError('Missing or invalid "query" in request body', field="query")
        k = self.resolve_top_k(top_k)

        vector = await self._embedding_client.embed(query)
        hits = await self._vector_store.knn_search(vector, k)

        logger.info(
            f"{__name__}:retrieve - Retrieved {len(hits)} chunks",
            extra={"query_length": len(query), "top_k": k, "hits": len(hits)},
        )
        return RetrievalResult(
            query=query,
            top_k=k,
            chunks=[
                RetrievedChunk(
                    text=hit.text,
                    source_document_key=hit.source_document_key,
                    score=hit.score,
                )
                for hit in hits
            ],
        )
