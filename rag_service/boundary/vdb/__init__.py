"""
Vector database boundary layer.

Provides the OpenSearch client factory, index bootstrap and vector store.

Dependencies: opensearch-py
System role: Vector store adapter for ingestion and retrieval
"""

from rag_service.boundary.vdb.index_manager import IndexManager, build_index_body
from rag_service.boundary.vdb.opensearch_client import build_opensearch_client
from rag_service.boundary.vdb.opensearch_store import OpenSearchVectorStore
from rag_service.boundary.vdb.vector_schemas import IndexedEntry, IndexSchema, SearchHit

__all__ = [
    "IndexManager",
    "build_index_body",
    "build_opensearch_client",
    "OpenSearchVectorStore",
    "IndexedEntry",
    "IndexSchema",
    "SearchHit",
]
