"""
Query and ingestion API models.

Request and response schemas for the query endpoint, the on-demand
ingestion endpoint and their error bodies.

Dependencies: pydantic
System role: API contracts shared by the Lambda handlers and FastAPI routes
"""

from pydantic import BaseModel, Field


class QueryRequest(BaseModel):
    """Query request body."""

    query: str = Field(description="User question")
    topK: int | None = Field(default=None, description="Number of chunks to retrieve (default 3)")


class SourceModel(BaseModel):
    """Source document reference with relevance score."""

    s3_key: str = Field(description="Storage key of the source document")
    score: float = Field(description="Relevance score")


class QueryResponse(BaseModel):
    """Answer with ranked sources."""

    answer: str
    sources: list[SourceModel] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Client error body (HTTP 400)."""

    message: str = Field(description="Error message")


class ServerErrorResponse(BaseModel):
    """Server error body (HTTP 500)."""

    message: str = Field(description="Error message")
    error: str = Field(description="Underlying error")


class IngestRequest(BaseModel):
    """On-demand ingestion request."""

    s3_key: str = Field(min_length=1, description="Object key in the documents bucket")
