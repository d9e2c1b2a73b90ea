"""
Document service orchestrator.

Coordinates document upload, ingestion, and listing.
Uses DocumentPipeline for vector index integration.

Dependencies: backend.boundary.aws, backend.boundary.db, backend.core
System role: Document management orchestration
"""

import logging
import uuid
from pathlib import Path
from typing import Sequence

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.aws.s3_client import S3DocumentClient
from backend.boundary.db.CRUD.document_crud import document_crud
from backend.boundary.db.models.document_model import DocumentModel, DocumentStatus
from backend.core.document_processing.entrypoint import DocumentPipeline

logger = logging.getLogger(__name__)


def build_storage_path(owner_id: str, file_name: str) -> str:
    """Object key for a new upload: {owner_id}/{uuid}{original extension}."""
    return f"{owner_id}/{uuid.uuid4()}{Path(file_name).suffix}"


class DocumentService:
    """
    Document service orchestrator.

    Stores raw files in S3, tracks them in PostgreSQL, and runs the
    ingestion pipeline so they become searchable.
    """

    def __init__(
        self,
        db: AsyncSession,
        pipeline: DocumentPipeline,
        storage: S3DocumentClient,
    ) -> None:
        """
        Initialize document service.

        Args:
            db: AsyncSession for document metadata tracking
            pipeline: Ingestion pipeline (extract -> chunk -> index)
            storage: Object storage client for raw files
        """
        self.db = db
        self._pipeline = pipeline
        self._storage = storage

    async def upload_document(
        self,
        owner_id: str,
        file_name: str,
        data: bytes,
        content_type: str,
    ) -> DocumentModel:
        """
        Store, record, and ingest an uploaded document.

        Steps:
        1. Put raw bytes in object storage under the owner's prefix
        2. Create document record with UPLOADED status and commit
        3. Process via pipeline (extract -> chunk -> embed+upload)
        4. Update document status to INDEXED and commit

        A pipeline failure propagates and leaves the record UPLOADED.

        Args:
            owner_id: Owner identifier from the verified token
            file_name: Original filename
            data: Raw file bytes
            content_type: Declared MIME type

        Returns:
            DocumentModel: The indexed document record

        Raises:
            ExtractionError: If no text could be extracted
            IndexingError: If the vector index upload fails
            ClientError: If the object storage upload fails
        """
        storage_path = build_storage_path(owner_id, file_name)
        await run_in_threadpool(self._storage.upload_document, storage_path, data, content_type)

        document = await document_crud.create(
            self.db,
            owner_id=owner_id,
            file_name=file_name,
            storage_path=storage_path,
            status=DocumentStatus.UPLOADED,
        )
        await self.db.commit()

        logger.info(
            "Document uploaded",
            extra={
                "document_id": str(document.id),
                "owner_id": owner_id,
                "storage_path": storage_path,
                "content_type": content_type,
            },
        )

        result = await run_in_threadpool(
            self._pipeline.ingest,
            data,
            content_type,
            owner_id,
            str(document.id),
        )

        document = await document_crud.mark_indexed(self.db, document.id)
        await self.db.commit()

        logger.info(
            "Document indexed",
            extra={
                "document_id": result.document_id,
                "owner_id": owner_id,
                "chunk_count": result.chunk_count,
            },
        )
        return document

    async def list_documents(self, owner_id: str) -> Sequence[DocumentModel]:
        """
        List the owner's documents, newest first.

        Args:
            owner_id: Owner identifier from the verified token

        Returns:
            Sequence[DocumentModel]: The owner's document records
        """
        return await document_crud.get_by_owner_id(self.db, owner_id)
