"""Activity model - calls, meetings, emails logged against a contact."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, UUIDMixin, CreatedAtMixin


class Activity(UUIDMixin, CreatedAtMixin, Base):
    __tablename__ = "activities"

    contact_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("contacts.id", ondelete="CASCADE"), index=True
    )
    type: Mapped[str] = mapped_column(String(50))  # call, email, meeting, etc.
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str | None] = mapped_column(Text, default=None)
    scheduled_at: Mapped[datetime | None] = mapped_column(DateTime, default=None)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, default=None)

    contact: Mapped["Contact"] = relationship(back_populates="activities")  # noqa: F821

    def __repr__(self) -> str:
        return f"<Activity {self.type} {self.title!r}>"
