"""
Query-side domain models.

Dependencies: pydantic
System role: Data contracts between retrieval and answer synthesis
"""

from pydantic import BaseModel, Field


class RetrievedChunk(BaseModel):
    """Chunk returned by k-NN search with its provenance."""

    text: str = Field(description="Chunk text content")
    source_document_key: str = Field(description="Storage key of the parent document")
    score: float = Field(description="Engine relevance score")


class RetrievalResult(BaseModel):
    """Ranked retrieval output, in descending score order as returned by the engine."""

    query: str
    top_k: int
    chunks: list[RetrievedChunk] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.chunks


class SourceRef(BaseModel):
    """Source reference returned alongside an answer."""

    s3_key: str = Field(description="Storage key of the source document")
    score: float = Field(description="Relevance score of the chunk")


class Answer(BaseModel):
    """Synthesized answer and its ranked sources."""

    answer: str
    sources: list[SourceRef] = Field(default_factory=list)
