"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - create_engine_from_settings(), create_session_factory(), create_tables(): Async connection management
  - DocumentModel, DocumentStatus: Document entity and lifecycle states
  - DocumentCRUD, document_crud: CRUD operations

Dependencies: sqlalchemy, backend.configs
System role: Database adapter providing persistent storage for document
metadata with auto-lifecycle management.
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    create_engine_from_settings,
    create_session_factory,
    create_tables,
)
from backend.boundary.db.models.document_model import DocumentModel, DocumentStatus
from backend.boundary.db.CRUD import (
    BaseCRUD,
    DocumentCRUD,
    document_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "create_engine_from_settings",
    "create_session_factory",
    "create_tables",
    # Models
    "DocumentModel",
    "DocumentStatus",
    # CRUD
    "BaseCRUD",
    "DocumentCRUD",
    "document_crud",
]
