"""
Service container.

Owns the long-lived collaborators of the API process: database engine,
object storage client, vector index, Gemini models, and the pipeline
components built on them. The container is created per application and any
collaborator can be injected up front (tests pass fakes); the rest are
built from settings in initialize().

Dependencies: backend.configs, backend.boundary, backend.core
System role: Composition root for service injection
"""

import logging

from langchain_core.embeddings import Embeddings
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.runnables import Runnable
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from backend.api.deps.auth import TokenVerifier
from backend.boundary.aws.s3_client import S3DocumentClient
from backend.boundary.db.connection import (
    create_engine_from_settings,
    create_session_factory,
    create_tables,
)
from backend.boundary.llm import create_chat_model, create_embeddings, create_extraction_model
from backend.boundary.vdb import VectorIndex, create_vector_index
from backend.configs import Settings
from backend.core.document_processing.entrypoint import DocumentPipeline
from backend.core.document_processing.tasks import ChunkingTask, ExtractionTask, IndexingTask
from backend.core.rag_query.answer_synthesizer import AnswerSynthesizer
from backend.core.retriever import Retriever

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Container for long-lived service instances."""

    def __init__(
        self,
        settings: Settings,
        *,
        engine: AsyncEngine | None = None,
        session_factory: async_sessionmaker | None = None,
        storage: S3DocumentClient | None = None,
        vector_index: VectorIndex | None = None,
        embeddings: Embeddings | None = None,
        extraction_model: BaseChatModel | None = None,
        chat_model: Runnable | None = None,
        pipeline: DocumentPipeline | None = None,
        retriever: Retriever | None = None,
        synthesizer: AnswerSynthesizer | None = None,
        token_verifier: TokenVerifier | None = None,
    ) -> None:
        self.settings = settings
        self.engine = engine
        self.session_factory = session_factory
        self.storage = storage
        self.vector_index = vector_index
        self.embeddings = embeddings
        self.extraction_model = extraction_model
        self.chat_model = chat_model
        self.pipeline = pipeline
        self.retriever = retriever
        self.synthesizer = synthesizer
        self.token_verifier = token_verifier
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def _get_vector_index(self) -> VectorIndex:
        if self.vector_index is None:
            if self.embeddings is None:
                self.embeddings = create_embeddings(self.settings.llm)
            self.vector_index = create_vector_index(self.settings.vector_store, self.embeddings)
        return self.vector_index

    async def initialize(self) -> None:
        """Build every collaborator that was not injected."""
        if self._initialized:
            return

        settings = self.settings

        if self.session_factory is None:
            if self.engine is None:
                self.engine = create_engine_from_settings(settings.database)
            self.session_factory = create_session_factory(self.engine)

        if settings.database.create_tables and self.engine is not None:
            await create_tables(self.engine)
            logger.info("Database tables ensured")

        if self.storage is None:
            self.storage = S3DocumentClient(
                bucket=settings.s3_documents.bucket,
                region=settings.s3_documents.region,
            )

        if self.pipeline is None:
            if self.extraction_model is None:
                self.extraction_model = create_extraction_model(settings.llm)
            self.pipeline = DocumentPipeline(
                extraction_task=ExtractionTask(self.extraction_model),
                chunking_task=ChunkingTask(
                    chunk_size=settings.ingestion.chunk_size,
                    chunk_overlap=settings.ingestion.chunk_overlap,
                ),
                indexing_task=IndexingTask(self._get_vector_index()),
            )

        if self.retriever is None:
            self.retriever = Retriever(self._get_vector_index(), top_k=settings.vector_store.top_k)

        if self.synthesizer is None:
            if self.chat_model is None:
                self.chat_model = create_chat_model(settings.llm)
            self.synthesizer = AnswerSynthesizer(self.retriever, self.chat_model)

        if self.token_verifier is None:
            self.token_verifier = TokenVerifier(settings.auth)

        self._initialized = True
        logger.info(
            "Service container initialized",
            extra={
                "environment": settings.environment,
                "vector_store": settings.vector_store.store_type,
                "namespace": settings.vector_store.namespace,
            },
        )

    async def shutdown(self) -> None:
        """Release pooled connections."""
        if self.engine is not None:
            await self.engine.dispose()
        self._initialized = False
        logger.info("Service container shut down")
