"""
Test suite for DocumentService.

Tests upload orchestration (storage, record, ingestion, status) and
owner-scoped listing against an in-memory database.

System role: Verification of document management orchestration
"""

import re
from unittest.mock import MagicMock

import pytest

from backend.application.services.document_service import DocumentService, build_storage_path
from backend.boundary.db.CRUD.document_crud import document_crud
from backend.boundary.db.models.document_model import DocumentStatus
from backend.core.document_processing.entrypoint import DocumentPipeline
from backend.core.document_processing.models import PipelineResult
from backend.core.exceptions import ExtractionError, IndexingError

UUID_PATTERN = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"


@pytest.fixture
def mock_pipeline() -> MagicMock:
    """Pipeline double reporting a single indexed chunk."""
    pipeline = MagicMock(spec=DocumentPipeline)
    pipeline.ingest.side_effect = lambda data, mime_type, owner_id, document_id: PipelineResult(
        document_id=document_id,
        chunk_count=1,
        chunk_ids=["abc"],
        namespace="memoryvault",
        processing_time_ms=1.0,
    )
    return pipeline


@pytest.fixture
def document_service(test_async_db, mock_pipeline, mock_storage) -> DocumentService:
    return DocumentService(db=test_async_db, pipeline=mock_pipeline, storage=mock_storage)


class TestBuildStoragePath:
    """Test suite for build_storage_path()."""

    def test_path_should_be_owner_prefixed_uuid_with_extension(self) -> None:
        path = build_storage_path("user-1", "notes.final.txt")

        assert re.fullmatch(rf"user-1/{UUID_PATTERN}\.txt", path)

    def test_path_without_extension_should_have_no_suffix(self) -> None:
        path = build_storage_path("user-1", "README")

        assert re.fullmatch(rf"user-1/{UUID_PATTERN}", path)

    def test_same_file_name_should_get_distinct_paths(self) -> None:
        assert build_storage_path("user-1", "a.pdf") != build_storage_path("user-1", "a.pdf")


class TestUploadDocument:
    """Test suite for DocumentService.upload_document()."""

    @pytest.mark.asyncio
    async def test_upload_should_store_record_and_index(
        self,
        document_service: DocumentService,
        mock_pipeline: MagicMock,
        mock_storage: MagicMock,
    ) -> None:
        # Act
        document = await document_service.upload_document(
            owner_id="user-1",
            file_name="notes.txt",
            data=b"hello world",
            content_type="text/plain",
        )

        # Assert
        assert document.status == DocumentStatus.INDEXED
        assert document.owner_id == "user-1"
        assert document.file_name == "notes.txt"
        assert re.fullmatch(rf"user-1/{UUID_PATTERN}\.txt", document.storage_path)

        mock_storage.upload_document.assert_called_once_with(
            document.storage_path, b"hello world", "text/plain"
        )
        mock_pipeline.ingest.assert_called_once_with(
            b"hello world", "text/plain", "user-1", str(document.id)
        )

    @pytest.mark.asyncio
    async def test_failed_extraction_should_leave_document_uploaded(
        self,
        document_service: DocumentService,
        mock_pipeline: MagicMock,
        test_async_db,
    ) -> None:
        # Arrange
        mock_pipeline.ingest.side_effect = ExtractionError("Document has no extractable text")

        # Act
        with pytest.raises(ExtractionError):
            await document_service.upload_document(
                owner_id="user-1",
                file_name="blank.txt",
                data=b"   ",
                content_type="text/plain",
            )

        # Assert
        documents = await document_crud.get_by_owner_id(test_async_db, "user-1")
        assert len(documents) == 1
        assert documents[0].status == DocumentStatus.UPLOADED

    @pytest.mark.asyncio
    async def test_failed_indexing_should_propagate(
        self,
        document_service: DocumentService,
        mock_pipeline: MagicMock,
    ) -> None:
        mock_pipeline.ingest.side_effect = IndexingError("Failed to index chunks")

        with pytest.raises(IndexingError):
            await document_service.upload_document(
                owner_id="user-1",
                file_name="notes.txt",
                data=b"hello",
                content_type="text/plain",
            )

    @pytest.mark.asyncio
    async def test_storage_failure_should_not_create_record(
        self,
        document_service: DocumentService,
        mock_storage: MagicMock,
        mock_pipeline: MagicMock,
        test_async_db,
    ) -> None:
        # Arrange
        mock_storage.upload_document.side_effect = RuntimeError("bucket unavailable")

        # Act
        with pytest.raises(RuntimeError):
            await document_service.upload_document(
                owner_id="user-1",
                file_name="notes.txt",
                data=b"hello",
                content_type="text/plain",
            )

        # Assert
        assert await document_crud.get_by_owner_id(test_async_db, "user-1") == []
        mock_pipeline.ingest.assert_not_called()


class TestListDocuments:
    """Test suite for DocumentService.list_documents()."""

    @pytest.mark.asyncio
    async def test_list_should_only_return_owner_documents(
        self,
        document_service: DocumentService,
    ) -> None:
        # Arrange
        await document_service.upload_document("user-1", "a.txt", b"a", "text/plain")
        await document_service.upload_document("user-2", "b.txt", b"b", "text/plain")

        # Act
        documents = await document_service.list_documents("user-1")

        # Assert
        assert [d.file_name for d in documents] == ["a.txt"]

    @pytest.mark.asyncio
    async def test_list_for_new_owner_should_be_empty(
        self,
        document_service: DocumentService,
    ) -> None:
        assert list(await document_service.list_documents("nobody")) == []
