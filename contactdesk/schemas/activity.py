"""Activity schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, field_validator

from .base import CamelModel, to_local_naive


class ActivityCreate(CamelModel):
    contact_id: str
    type: str
    title: str
    description: str | None = None
    scheduled_at: datetime | None = None
    completed_at: datetime | None = None

    @field_validator("scheduled_at", "completed_at")
    @classmethod
    def _local_time(cls, value: datetime | None) -> datetime | None:
        return to_local_naive(value)


class ActivityRecord(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    contact_id: str
    type: str
    title: str
    description: str | None = None
    scheduled_at: datetime | None = None
    completed_at: datetime | None = None
    created_at: datetime
