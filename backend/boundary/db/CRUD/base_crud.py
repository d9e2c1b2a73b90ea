"""
Generic async CRUD helpers.

Operations flush but never commit: the calling service decides where a
unit of work ends (DocumentService commits once after the row is created
and again after it is marked indexed).

Dependencies: sqlalchemy
System role: Shared persistence primitives for model-specific CRUD classes
"""

from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Create / read / update for one ORM model keyed by a UUID `id`.

    Attributes:
        model: ORM class the helpers operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Insert a row and return it with defaults (id, timestamps) populated.

        Args:
            session: Async database session
            **values: Column values

        Returns:
            The flushed and refreshed instance
        """
        instance = self.model(**values)
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        result = await session.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def update_by_id(
        self,
        session: AsyncSession,
        id: UUID,
        **values: Any,
    ) -> ModelT | None:
        """
        Assign new column values to an existing row.

        The row is loaded and mutated through the ORM (not a bulk UPDATE)
        so onupdate defaults such as updated_at are applied.

        Returns:
            The updated instance, or None when no row has that id
        """
        instance = await self.get_by_id(session, id)
        if instance is None:
            return None

        for column, value in values.items():
            setattr(instance, column, value)
        await session.flush()
        await session.refresh(instance)
        return instance
