"""
ORM Declarative Base

Every table has a UUID key; most also record when a row was written and last
changed. Types are dialect-neutral so the models run on PostgreSQL and SQLite.
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, event, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    pass


class UUIDPrimaryKeyMixin:
    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4)


class TimestampMixin:
    """Adds ``created_at``/``updated_at`` columns, stored timezone-aware."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )


# Column defaults only apply at flush; objects get values at construction too
@event.listens_for(UUIDPrimaryKeyMixin, "init", propagate=True)
def _assign_id(target, args, kwargs):  # type: ignore[no-untyped-def]
    if "id" not in kwargs:
        target.id = uuid4()


@event.listens_for(TimestampMixin, "init", propagate=True)
def _stamp_times(target, args, kwargs):  # type: ignore[no-untyped-def]
    now = utcnow()
    if "created_at" not in kwargs:
        target.created_at = now
    if "updated_at" not in kwargs:
        target.updated_at = now
