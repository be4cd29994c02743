"""Contact schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import ConfigDict, field_validator

from .base import CamelModel

DEFAULT_STATUS = "prospect"
ALL = "all"


class ContactCreate(CamelModel):
    name: str
    email: str
    phone: str | None = None
    company: str | None = None
    title: str | None = None
    status: str = DEFAULT_STATUS
    notes: str | None = None


class ContactUpdate(CamelModel):
    """Partial update. Only fields present in the payload are applied."""

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    title: str | None = None
    status: str | None = None
    notes: str | None = None

    @field_validator("name", "email", "status", mode="before")
    @classmethod
    def _not_null(cls, value):
        # Defaults are not validated, so this only fires for an explicit null.
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value


class ContactRecord(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    phone: str | None = None
    company: str | None = None
    title: str | None = None
    status: str = DEFAULT_STATUS
    notes: str | None = None
    created_at: datetime
    updated_at: datetime


class ContactFilters(CamelModel):
    """Query filters for listing contacts. ``"all"`` disables company/status."""

    search: str | None = None
    company: str | None = None
    status: str | None = None

    @property
    def search_term(self) -> str | None:
        return self.search.lower() if self.search else None

    @property
    def company_value(self) -> str | None:
        if not self.company or self.company == ALL:
            return None
        return self.company

    @property
    def status_value(self) -> str | None:
        if not self.status or self.status == ALL:
            return None
        return self.status
