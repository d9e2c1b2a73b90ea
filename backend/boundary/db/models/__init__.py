"""
ORM models.

Importing this package registers every table on Base.metadata
(create_tables relies on it).
"""

from backend.boundary.db.models.document_model import DocumentModel, DocumentStatus

__all__ = ["DocumentModel", "DocumentStatus"]
