"""Tests for the query endpoint."""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from rag_service.api.deps import get_query_service
from rag_service.api.main import create_app
from rag_service.application.query_service import QueryService
from rag_service.boundary.bedrock.model_adapters import AnthropicMessagesAdapter
from rag_service.boundary.vdb.vector_schemas import SearchHit
from rag_service.core.rag_query.retriever import RetrievalPipeline
from rag_service.core.rag_query.synthesizer import AnswerSynthesizer


@pytest.fixture
def app(
    mock_embedding_client: MagicMock,
    mock_vector_store: MagicMock,
    mock_generation_client: MagicMock,
) -> FastAPI:
    """Provide app with the query service wired to mocks."""
    service = QueryService(
        RetrievalPipeline(mock_embedding_client, mock_vector_store),
        AnswerSynthesizer(mock_generation_client, AnthropicMessagesAdapter()),
    )
    app = create_app()
    app.dependency_overrides[get_query_service] = lambda: service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide test client without running the lifespan."""
    return TestClient(app)


class TestQueryEndpoint:
    """Test POST /api/v1/query."""

    def test_answer(self, client: TestClient, mock_vector_store: MagicMock) -> None:
        """Should return the answer and ranked sources."""
        mock_vector_store.knn_search.return_value = [
            SearchHit(text="Paris is the capital of France.", source_document_key="doc1.txt", score=0.87),
        ]

        response = client.post("/api/v1/query", json={"query": "What is the capital of France?", "topK": 1})

        assert response.status_code == 200
        assert response.json() == {
            "answer": "Paris is the capital.",
            "sources": [{"s3_key": "doc1.txt", "score": 0.87}],
        }

    def test_missing_query(self, client: TestClient) -> None:
        """Should return 400 with the same message as the query Lambda."""
        response = client.post("/api/v1/query", json={"topK": 3})

        assert response.status_code == 400
        assert response.json() == {"message": 'Missing or invalid "query" in request body'}

    def test_invalid_json(self, client: TestClient) -> None:
        """Should return 400 for a malformed body."""
        response = client.post(
            "/api/v1/query",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid JSON in request body"}

    def test_embedding_failure(self, client: TestClient, mock_embedding_client: MagicMock) -> None:
        """Should return 500 when the query cannot be embedded."""
        mock_embedding_client.embed.side_effect = RuntimeError("bedrock unavailable")

        response = client.post("/api/v1/query", json={"query": "q"})

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error", "error": "bedrock unavailable"}

    def test_correlation_id_echoed(self, client: TestClient) -> None:
        """Should echo the caller's correlation ID."""
        response = client.post(
            "/api/v1/query",
            json={"query": "q"},
            headers={"X-Correlation-ID": "corr-42"},
        )

        assert response.headers["X-Correlation-ID"] == "corr-42"

    def test_correlation_id_generated(self, client: TestClient) -> None:
        """Should generate a correlation ID when none is supplied."""
        response = client.post("/api/v1/query", json={"query": "q"})

        assert response.headers["X-Correlation-ID"]
