"""
Declarative base and shared column mixins for MemoryVault tables.

Every table gets a UUID primary key and UTC creation/update timestamps.
Constraint names follow a fixed convention so migrations generated against
PostgreSQL and the SQLite test database agree.

Dependencies: sqlalchemy
System role: ORM foundation for document metadata
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, MetaData, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Registry for all MemoryVault ORM models (used by create_tables)."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class UUIDMixin:
    """
    UUID v4 primary key, generated client-side on insert.

    The id doubles as the document_id stamped on every vector chunk, so it
    must exist before ingestion starts. Uuid maps to native UUID on
    PostgreSQL and CHAR(32) elsewhere.
    """

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )


class TimestampMixin:
    """created_at (set once) and updated_at (bumped on every flush that changes the row), both UTC."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )
