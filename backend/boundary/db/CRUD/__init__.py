"""
Async CRUD for MemoryVault tables.

Usage:
    from backend.boundary.db.CRUD import document_crud

    documents = await document_crud.get_by_owner_id(db, owner_id)
    await document_crud.mark_indexed(db, document.id)
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.document_crud import DocumentCRUD, document_crud

__all__ = [
    "BaseCRUD",
    "DocumentCRUD",
    "document_crud",
]
