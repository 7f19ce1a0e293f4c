"""
Chunk indexing task.

Embeds each chunk and writes it to the vector index under its deterministic
entry ID. Chunks are handled strictly in sequence.

Dependencies: rag_service.boundary.bedrock, rag_service.boundary.vdb
System role: Final stage of document ingestion pipeline
"""

import logging

from rag_service.boundary.bedrock.embedding_client import BedrockEmbeddingClient
from rag_service.boundary.vdb.opensearch_store import OpenSearchVectorStore
from rag_service.boundary.vdb.vector_schemas import IndexedEntry

from ..models import Chunk

logger = logging.getLogger(__name__)


class IndexingTask:
    """Embed chunks and persist them as index entries."""

    def __init__(
        self,
        embedding_client: BedrockEmbeddingClient,
        vector_store: OpenSearchVectorStore,
    ) -> None:
        self._embedding_client = embedding_client
        self._vector_store = vector_store

    async def index_chunks(self, chunks: list[Chunk], indexed_ids: list[str] | None = None) -> list[str]:
        """
        Embed and write chunks one at a time.

        A failure stops processing at the failing chunk; entries already
        written stay in the index. Callers may pass ``indexed_ids`` to observe
        progress up to the failure.

        Args:
            chunks: Ordered chunks of one document
            indexed_ids: Optional list that receives each written entry ID

        Returns:
            list[str]: Entry IDs written, in chunk order

        Raises:
            EmbeddingError: When a chunk cannot be embedded
            VectorStoreError: When an entry cannot be written
        """
        written = indexed_ids if indexed_ids is not None else []
        for chunk in chunks:
            vector = await self._embedding_client.embed(chunk.text)
            entry = IndexedEntry(
                entry_id=chunk.entry_id,
                vector=vector,
                text=chunk.text,
                source_document_key=chunk.document_key,
            )
            await self._vector_store.write_entry(entry)
            written.append(entry.entry_id)
            logger.debug(
                f"{__name__}:index_chunks - Indexed chunk",
                extra={"entry_id": entry.entry_id},
            )
        return written
