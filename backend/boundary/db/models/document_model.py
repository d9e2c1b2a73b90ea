"""
Document ORM model.

Represents uploaded documents with ingestion status and storage location.
Tracks the document lifecycle from upload to vector indexing.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Document persistence for ingestion tracking
"""

import enum

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class DocumentStatus(str, enum.Enum):
    """
    Document lifecycle states.

    UPLOADED: Raw file stored and row created; not (yet) searchable
    INDEXED: Chunks stored in the vector index, ready for retrieval
    FAILED: Reserved for operators marking documents that will never index
    """

    UPLOADED = "uploaded"
    INDEXED = "indexed"
    FAILED = "failed"


class DocumentModel(Base, UUIDMixin, TimestampMixin):
    """
    Document ORM model tracking ingestion state.

    Lifecycle: Upload (UPLOADED) -> extract, chunk, index -> INDEXED.
    A failed ingestion leaves the row UPLOADED. Only status changes after
    creation.

    Attributes:
        id: UUID primary key (auto-generated)
        owner_id: Token subject of the uploading user
        file_name: Original filename (255 char limit)
        storage_path: Object key of the raw file, "{owner_id}/{uuid}{ext}"
        status: Current lifecycle state
        created_at: Document upload timestamp (UTC)
        updated_at: Last status change timestamp (UTC)
    """

    __tablename__ = "documents"

    owner_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        doc="Owner identifier (token subject)",
    )

    file_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        doc="Original filename",
    )

    storage_path: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="Object storage key for raw document",
    )

    status: Mapped[DocumentStatus] = mapped_column(
        Enum(DocumentStatus, native_enum=False, length=16),
        nullable=False,
        default=DocumentStatus.UPLOADED,
    )
