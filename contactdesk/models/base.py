"""Base model classes and mixins for ContactDesk models."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    pass


class UUIDMixin:
    """Adds a random UUID string primary key."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)


class CreatedAtMixin:
    """Adds a created_at column.

    Timestamps are naive local datetimes supplied by the storage clock, so
    there is no server default.
    """

    created_at: Mapped[datetime] = mapped_column(DateTime, index=True)


class TimestampMixin(CreatedAtMixin):
    """Adds created_at / updated_at columns."""

    updated_at: Mapped[datetime] = mapped_column(DateTime, index=True)
