"""
Document API endpoints.

Routes:
- GET /documents - List the caller's documents, newest first
- POST /documents/upload - Upload and ingest a document
- POST /documents/search - Semantic search over the caller's documents

Dependencies: backend.application.services, backend.models
System role: Document HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from backend.api.deps import (
    get_chat_service,
    get_current_owner,
    get_document_service,
    get_settings_dependency,
)
from backend.application.services.chat_service import ChatService
from backend.application.services.document_service import DocumentService
from backend.configs import Settings
from backend.core.exceptions import ValidationError
from backend.models.document import (
    DocumentResponse,
    SearchRequest,
    SearchResponse,
    SearchResult,
    UploadDocumentResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("", response_model=list[DocumentResponse])
async def list_documents(
    owner_id: str = Depends(get_current_owner),
    document_service: DocumentService = Depends(get_document_service),
) -> list[DocumentResponse]:
    """
    List the caller's documents.

    Returns:
        list[DocumentResponse]: Documents ordered by creation time, newest first
    """
    documents = await document_service.list_documents(owner_id)
    return [DocumentResponse.model_validate(document) for document in documents]


@router.post(
    "/upload",
    response_model=UploadDocumentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_document(
    file: UploadFile | None = File(default=None),
    owner_id: str = Depends(get_current_owner),
    document_service: DocumentService = Depends(get_document_service),
    settings: Settings = Depends(get_settings_dependency),
) -> UploadDocumentResponse:
    """
    Upload a document and make it searchable.

    The file is stored, recorded with status "uploaded", run through
    extraction, chunking, and indexing, then marked "indexed".

    Args:
        file: Multipart file field
        owner_id: Caller identity (injected)
        document_service: Injected DocumentService
        settings: Application settings (upload size limit)

    Returns:
        UploadDocumentResponse: The indexed document

    Raises:
        ValidationError(400): No file in the request
        HTTPException(413): File larger than the upload limit
        ExtractionError(422): No text could be extracted
        IndexingError(502): Vector index upload failed
    """
    if file is None or not file.filename:
        raise ValidationError("No file uploaded", field="file")

    max_bytes = settings.ingestion.max_upload_bytes
    data = await file.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds the {max_bytes} byte upload limit",
        )

    content_type = file.content_type or "application/octet-stream"

    logger.info(
        "Document upload received",
        extra={
            "owner_id": owner_id,
            "file_name": file.filename,
            "content_type": content_type,
            "size_bytes": len(data),
        },
    )

    document = await document_service.upload_document(
        owner_id=owner_id,
        file_name=file.filename,
        data=data,
        content_type=content_type,
    )
    return UploadDocumentResponse(document=DocumentResponse.model_validate(document))


@router.post("/search", response_model=SearchResponse)
async def search_documents(
    request: SearchRequest,
    owner_id: str = Depends(get_current_owner),
    chat_service: ChatService = Depends(get_chat_service),
) -> SearchResponse:
    """
    Return the caller's chunks most relevant to the query.

    Raises:
        RetrievalError(502): Vector search failed
    """
    chunks = await chat_service.search(request.query, owner_id)
    return SearchResponse(
        results=[SearchResult(**chunk.model_dump()) for chunk in chunks],
    )
