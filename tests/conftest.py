"""
Shared test fixtures and configuration for entire test suite.

Provides: remote client mocks (embedding, vector store, index manager,
generation), pipeline settings and a wired ingestion pipeline.
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from rag_service.boundary.vdb.vector_schemas import IndexSchema
from rag_service.core.document_processing.configs import DocumentPipelineSettings
from rag_service.core.document_processing.entrypoint import IngestionPipeline

EMBEDDING_DIMENSION = 4


@pytest.fixture
def fake_vector() -> list[float]:
    """Provide an embedding of the test dimension."""
    return [0.1, 0.2, 0.3, 0.4]


@pytest.fixture
def mock_embedding_client(fake_vector: list[float]) -> MagicMock:
    """Provide mock embedding client returning a fixed vector."""
    client = MagicMock()
    client.dimension = EMBEDDING_DIMENSION
    client.model_id = "amazon.titan-embed-text-v1"
    client.embed = AsyncMock(return_value=fake_vector)
    return client


@pytest.fixture
def mock_vector_store() -> MagicMock:
    """Provide mock vector store with no search hits."""
    store = MagicMock()
    store.index_name = "test-index"
    store.write_entry = AsyncMock(return_value=None)
    store.knn_search = AsyncMock(return_value=[])
    return store


@pytest.fixture
def mock_index_manager() -> MagicMock:
    """Provide mock index manager."""
    manager = MagicMock()
    manager.ensure_index = AsyncMock(return_value=False)
    return manager


@pytest.fixture
def mock_generation_client() -> MagicMock:
    """Provide mock generation client with a messages-style response."""
    client = MagicMock()
    client.model_id = "anthropic.claude-3-sonnet-20240229-v1:0"
    client.invoke = AsyncMock(
        return_value={"content": [{"type": "text", "text": "  Paris is the capital.  "}]}
    )
    return client


@pytest.fixture
def pipeline_settings() -> DocumentPipelineSettings:
    """Provide default chunking settings."""
    return DocumentPipelineSettings(chunk_size=1000, chunk_overlap=100)


@pytest.fixture
def index_schema() -> IndexSchema:
    """Provide index schema with the test dimension."""
    return IndexSchema(dimension=EMBEDDING_DIMENSION)


@pytest.fixture
def ingestion_pipeline(
    mock_embedding_client: MagicMock,
    mock_index_manager: MagicMock,
    mock_vector_store: MagicMock,
    pipeline_settings: DocumentPipelineSettings,
) -> IngestionPipeline:
    """Provide ingestion pipeline wired to mocks."""
    return IngestionPipeline(
        mock_embedding_client,
        mock_index_manager,
        mock_vector_store,
        settings=pipeline_settings,
    )
