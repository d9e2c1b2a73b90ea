"""
Document domain models and schemas.

Request/response schemas for document operations.

Dependencies: pydantic
System role: Document API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentResponse(BaseModel):
    """Response schema for document operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    owner_id: str
    file_name: str
    storage_path: str
    status: str
    created_at: datetime

    @field_validator("status", mode="before")
    @classmethod
    def status_value(cls, value):
        return getattr(value, "value", value)


class UploadDocumentResponse(BaseModel):
    """Response schema for a completed upload."""

    message: str = "File uploaded successfully"
    document: DocumentResponse


class SearchRequest(BaseModel):
    """Request schema for semantic search over the caller's documents."""

    query: str = Field(description="Free-text search query")

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Query is required")
        return value


class SearchResult(BaseModel):
    """Single retrieved chunk."""

    content: str
    score: float = Field(description="Similarity to the query, higher is better")
    document_id: str
    chunk_id: str


class SearchResponse(BaseModel):
    """Response schema for semantic search."""

    message: str = "Search successful"
    results: list[SearchResult]
