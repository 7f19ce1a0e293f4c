"""
Vector database schemas.

Pydantic models for vector index writes and k-NN search results.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class IndexSchema(BaseModel):
    """k-NN index layout: field names, dimension and HNSW parameters."""

    vector_field: str = Field(default="embedding_vector")
    text_field: str = Field(default="text_chunk")
    source_field: str = Field(default="source_document_s3_key")
    dimension: int = Field(default=1536, gt=0)
    space_type: str = Field(default="cosinesimil")
    engine: str = Field(default="nmslib")
    ef_construction: int = Field(default=256, gt=0)
    m: int = Field(default=48, gt=0)
    ef_search: int = Field(default=512, gt=0)


class IndexedEntry(BaseModel):
    """Persisted unit in the vector index."""

    entry_id: str = Field(description="Deterministic '{document_key}_chunk_{i}' identifier")
    vector: list[float] = Field(description="Embedding vector")
    text: str = Field(description="Chunk text content")
    source_document_key: str = Field(description="Storage key of the parent document")


class SearchHit(BaseModel):
    """Single result from k-NN search, in engine order."""

    text: str = Field(description="Chunk text content")
    source_document_key: str = Field(description="Storage key of the parent document")
    score: float = Field(description="Engine relevance score")
