"""
Service container.

Builds the long-lived remote clients and pipeline components once from
settings and hands out shared instances. Used by the Lambda handlers (one
container per execution environment) and by the FastAPI dependency layer.

Dependencies: rag_service.configs, rag_service.boundary, rag_service.core
System role: Composition root
"""

import logging

from rag_service.boundary.aws.s3_client import S3DocumentClient
from rag_service.boundary.bedrock.embedding_client import BedrockEmbeddingClient
from rag_service.boundary.bedrock.generation_client import BedrockGenerationClient
from rag_service.boundary.bedrock.model_adapters import (
    ModelAdapter,
    SamplingParameters,
    get_model_adapter,
)
from rag_service.boundary.bedrock.runtime import build_bedrock_runtime_client
from rag_service.boundary.vdb.index_manager import IndexManager
from rag_service.boundary.vdb.opensearch_client import build_opensearch_client
from rag_service.boundary.vdb.opensearch_store import OpenSearchVectorStore
from rag_service.boundary.vdb.vector_schemas import IndexSchema
from rag_service.configs.settings import Settings
from rag_service.core.document_processing.entrypoint import IngestionPipeline
from rag_service.core.document_processing.tasks import S3DownloadTask
from rag_service.core.rag_query.retriever import RetrievalPipeline
from rag_service.core.rag_query.synthesizer import AnswerSynthesizer

from .ingestion_service import StorageIngestionService
from .query_service import QueryService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Container for cached client and service instances."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._bedrock_runtime = None
        self._opensearch_client = None
        self._embedding_client: BedrockEmbeddingClient | None = None
        self._vector_store: OpenSearchVectorStore | None = None
        self._model_adapter: ModelAdapter | None = None
        self._query_service: QueryService | None = None
        self._ingestion_service: StorageIngestionService | None = None

    @property
    def index_schema(self) -> IndexSchema:
        os_settings = self.settings.opensearch
        return IndexSchema(
            vector_field=os_settings.vector_field,
            text_field=os_settings.text_field,
            source_field=os_settings.source_field,
            dimension=os_settings.embedding_dimension,
            space_type=os_settings.space_type,
            engine=os_settings.engine,
            ef_construction=os_settings.ef_construction,
            m=os_settings.m,
            ef_search=os_settings.ef_search,
        )

    @property
    def bedrock_runtime(self):
        """Get cached bedrock-runtime client."""
        if self._bedrock_runtime is None:
            self._bedrock_runtime = build_bedrock_runtime_client(
                region=self.settings.aws_region,
                connect_timeout=self.settings.bedrock.connect_timeout,
                read_timeout=self.settings.bedrock.read_timeout,
            )
        return self._bedrock_runtime

    @property
    def opensearch_client(self):
        """Get cached OpenSearch client."""
        if self._opensearch_client is None:
            self._opensearch_client = build_opensearch_client(
                endpoint=self.settings.opensearch.collection_endpoint,
                region=self.settings.aws_region,
                service=self.settings.opensearch.service,
                timeout=self.settings.opensearch.request_timeout,
            )
        return self._opensearch_client

    @property
    def model_adapter(self) -> ModelAdapter:
        """Get the adapter for the configured generation model; resolves 'auto' once."""
        if self._model_adapter is None:
            self._model_adapter = get_model_adapter(
                self.settings.bedrock.llm_model_id,
                self.settings.bedrock.llm_model_family,
            )
        return self._model_adapter

    @property
    def embedding_client(self) -> BedrockEmbeddingClient:
        """Get cached embedding client."""
        if self._embedding_client is None:
            self._embedding_client = BedrockEmbeddingClient(
                self.bedrock_runtime,
                model_id=self.settings.bedrock.embedding_model_id,
                dimension=self.settings.opensearch.embedding_dimension,
            )
        return self._embedding_client

    @property
    def vector_store(self) -> OpenSearchVectorStore:
        """Get cached vector store."""
        if self._vector_store is None:
            self._vector_store = OpenSearchVectorStore(
                self.opensearch_client,
                index_name=self.settings.opensearch.index_name,
                schema=self.index_schema,
                refresh_on_write=self.settings.opensearch.refresh_on_write,
            )
        return self._vector_store

    @property
    def query_service(self) -> QueryService:
        """Get cached query service."""
        if self._query_service is None:
            bedrock = self.settings.bedrock
            retriever = RetrievalPipeline(
                self.embedding_client,
                self.vector_store,
                default_top_k=self.settings.opensearch.default_top_k,
                max_top_k=self.settings.opensearch.max_top_k,
            )
            synthesizer = AnswerSynthesizer(
                BedrockGenerationClient(self.bedrock_runtime, bedrock.llm_model_id),
                self.model_adapter,
                SamplingParameters(
                    max_tokens=bedrock.max_tokens,
                    temperature=bedrock.temperature,
                    top_p=bedrock.top_p,
                ),
            )
            self._query_service = QueryService(retriever, synthesizer)
        return self._query_service

    @property
    def ingestion_service(self) -> StorageIngestionService:
        """Get cached storage ingestion service."""
        if self._ingestion_service is None:
            pipeline = IngestionPipeline(
                self.embedding_client,
                IndexManager(self.opensearch_client, self.index_schema),
                self.vector_store,
                settings=self.settings.pipeline,
            )
            download_task = S3DownloadTask(S3DocumentClient(region=self.settings.aws_region))
            self._ingestion_service = StorageIngestionService(
                pipeline,
                download_task,
                documents_bucket=self.settings.documents.bucket_name,
            )
        return self._ingestion_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._bedrock_runtime = None
        self._opensearch_client = None
        self._embedding_client = None
        self._vector_store = None
        self._model_adapter = None
        self._query_service = None
        self._ingestion_service = None
        logger.info(f"{__name__}:clear - Service container cleared")
