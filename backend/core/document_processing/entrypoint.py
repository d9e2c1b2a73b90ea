"""
Document pipeline orchestrator.

Coordinates text extraction, chunking, and vector index upload tasks.
IndexingTask handles embedding generation through the vector index.

Dependencies: All task modules
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time

from .models import PipelineResult
from .tasks import (
    ChunkingTask,
    ExtractionTask,
    IndexingTask,
)

logger = logging.getLogger(__name__)


class DocumentPipeline:
    """Orchestrate document ingestion: extract -> chunk -> embed+upload."""

    def __init__(
        self,
        extraction_task: ExtractionTask,
        chunking_task: ChunkingTask,
        indexing_task: IndexingTask,
    ) -> None:
        """
        Initialize pipeline with its stages.

        Args:
            extraction_task: Converts bytes to text
            chunking_task: Splits text into overlapping chunks
            indexing_task: Stores chunks in the vector index
        """
        self._extraction_task = extraction_task
        self._chunking_task = chunking_task
        self._indexing_task = indexing_task

    def ingest(
        self,
        data: bytes,
        mime_type: str,
        owner_id: str,
        document_id: str,
    ) -> PipelineResult:
        """
        Process a document through the full pipeline.

        Stages run sequentially; the first failure aborts ingestion and
        propagates unchanged.

        Args:
            data: Raw document bytes
            mime_type: Declared MIME type
            owner_id: Owner of the document
            document_id: Document identifier recorded on every chunk

        Returns:
            PipelineResult: Processing result with chunk count and IDs

        Raises:
            ExtractionError: Text extraction failed or produced no text
            IndexingError: Vector index upload failed
        """
        start_time = time.perf_counter()

        text = self._extraction_task.extract(data, mime_type, document_id=document_id)

        chunks = self._chunking_task.chunk(text)

        chunk_ids = self._indexing_task.index(chunks, owner_id=owner_id, document_id=document_id)

        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            "Document ingested",
            extra={
                "document_id": document_id,
                "owner_id": owner_id,
                "chunk_count": len(chunk_ids),
                "processing_time_ms": round(elapsed_ms, 2),
            },
        )

        return PipelineResult(
            document_id=document_id,
            chunk_count=len(chunk_ids),
            chunk_ids=chunk_ids,
            namespace=self._indexing_task.namespace,
            processing_time_ms=elapsed_ms,
        )
