"""
Document metadata persistence.

Rows are created once per upload and afterwards only change status.
Listing is always scoped to one owner.

Dependencies: sqlalchemy, backend.boundary.db.models.document_model
System role: Document persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.document_model import DocumentModel, DocumentStatus


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """Owner-scoped queries and status transitions for DocumentModel."""

    def __init__(self) -> None:
        super().__init__(DocumentModel)

    async def get_by_owner_id(
        self,
        session: AsyncSession,
        owner_id: str,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[DocumentModel]:
        """
        List an owner's documents, newest upload first.

        Args:
            session: Async database session
            owner_id: Token subject of the owner
            limit: Page size (None returns everything)
            offset: Rows to skip

        Returns:
            Sequence[DocumentModel]: Only rows whose owner_id matches
        """
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.owner_id == owner_id)
            .order_by(DocumentModel.created_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await session.execute(stmt)
        return result.scalars().all()

    async def update_status(
        self,
        session: AsyncSession,
        id: UUID,
        status: DocumentStatus,
    ) -> DocumentModel | None:
        return await self.update_by_id(session, id, status=status)

    async def mark_indexed(self, session: AsyncSession, id: UUID) -> DocumentModel | None:
        """Record that every chunk of the document is in the vector index."""
        return await self.update_status(session, id, DocumentStatus.INDEXED)


document_crud = DocumentCRUD()
