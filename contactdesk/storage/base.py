"""Storage contract shared by the in-memory and database backends."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Callable

from ..schemas import (
    ActivityCreate,
    ActivityRecord,
    ContactCreate,
    ContactFilters,
    ContactRecord,
    ContactUpdate,
    Metrics,
    UserCreate,
    UserRecord,
)

Clock = Callable[[], datetime]

PROSPECT = "prospect"
ACTIVE = "active"


def day_bounds(now: datetime) -> tuple[datetime, datetime]:
    """Return the half-open interval [midnight today, midnight tomorrow)."""
    start = now.replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


def conversion_rate(active: int, total: int) -> float:
    """Percentage of active contacts, rounded half-up to one decimal place.

    The percentage is computed first and then scaled, in that order, so the
    float result matches the dashboard figures of earlier releases exactly.
    """
    if total <= 0:
        return 0
    rate = active / total * 100
    return math.floor(rate * 10 + 0.5) / 10


def matches_search(contact: ContactRecord, term: str) -> bool:
    """Case-insensitive substring match on name, email or company.

    ``term`` must already be lowercased.
    """
    return (
        term in contact.name.lower()
        or term in contact.email.lower()
        or bool(contact.company and term in contact.company.lower())
    )


class Storage(ABC):
    """Owns users, contacts and activities.

    Absence is reported with ``None`` / ``False``; no operation raises for a
    missing record and none of them validate input.
    """

    def __init__(self, clock: Clock | None = None):
        self._clock: Clock = clock or datetime.now

    def now(self) -> datetime:
        return self._clock()

    async def init(self) -> None:
        """Prepare the backend for use."""

    async def close(self) -> None:
        """Release backend resources."""

    async def ping(self) -> None:
        """Raise if the backend cannot serve requests."""

    # Users

    @abstractmethod
    async def get_user(self, user_id: str) -> UserRecord | None: ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> UserRecord | None: ...

    @abstractmethod
    async def create_user(self, data: UserCreate) -> UserRecord: ...

    # Contacts

    @abstractmethod
    async def get_contacts(
        self, filters: ContactFilters | None = None
    ) -> list[ContactRecord]:
        """List contacts matching every given filter, most recently updated first."""

    @abstractmethod
    async def get_contact(self, contact_id: str) -> ContactRecord | None: ...

    @abstractmethod
    async def get_contact_by_email(self, email: str) -> ContactRecord | None: ...

    @abstractmethod
    async def create_contact(self, data: ContactCreate) -> ContactRecord: ...

    @abstractmethod
    async def update_contact(
        self, contact_id: str, data: ContactUpdate
    ) -> ContactRecord | None:
        """Overwrite only the fields set on ``data`` and bump updated_at."""

    @abstractmethod
    async def delete_contact(self, contact_id: str) -> bool:
        """Delete a contact and its activities. Returns True if it existed."""

    # Activities

    @abstractmethod
    async def get_activities(self, contact_id: str | None = None) -> list[ActivityRecord]:
        """List activities, optionally for one contact, newest first."""

    @abstractmethod
    async def create_activity(self, data: ActivityCreate) -> ActivityRecord: ...

    # Dashboard

    @abstractmethod
    async def get_metrics(self) -> Metrics: ...
