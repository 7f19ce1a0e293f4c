"""
Vector index configuration settings.

Manages the OpenSearch Serverless collection, the k-NN index schema and
retrieval limits.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for ingestion and retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenSearchSettings(BaseSettings):
    """OpenSearch Serverless vector index configuration."""

    model_config = SettingsConfigDict(
        env_prefix="OPENSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    collection_endpoint: str = Field(
        default="",
        description="Collection endpoint host, without scheme (required)",
    )
    index_name: str = Field(default="my-rag-index", description="k-NN index name")
    service: str = Field(
        default="aoss",
        description="SigV4 service name: 'aoss' for Serverless, 'es' for managed domains",
    )

    embedding_dimension: int = Field(
        default=1536,
        gt=0,
        description="Vector dimension; must equal the embedding model's output length",
    )
    space_type: str = Field(default="cosinesimil", description="k-NN distance metric")
    engine: str = Field(default="nmslib", description="k-NN engine backing the HNSW graph")
    ef_construction: int = Field(default=256, gt=0, description="HNSW construction breadth")
    m: int = Field(default=48, gt=0, description="HNSW links per node")
    ef_search: int = Field(default=512, gt=0, description="HNSW search breadth")

    vector_field: str = Field(default="embedding_vector")
    text_field: str = Field(default="text_chunk")
    source_field: str = Field(default="source_document_s3_key")

    refresh_on_write: bool = Field(
        default=True,
        description="Make each indexed chunk searchable before the write returns",
    )
    request_timeout: int = Field(default=30, gt=0, description="Per-request timeout in seconds")

    default_top_k: int = Field(default=3, gt=0, description="Neighbors retrieved when topK is omitted")
    max_top_k: int = Field(default=100, gt=0, description="Largest accepted topK")
