"""In-memory storage. Data lives for the lifetime of the process."""

from __future__ import annotations

import logging

from ..models.base import new_id
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
from .base import (
    ACTIVE,
    PROSPECT,
    Clock,
    Storage,
    conversion_rate,
    day_bounds,
    matches_search,
)

logger = logging.getLogger(__name__)


class MemStorage(Storage):
    """Dict-backed storage keyed by id, insertion order preserved.

    No method awaits between reading and writing a collection, so every
    operation runs to completion without interleaving on the event loop.
    """

    def __init__(self, clock: Clock | None = None):
        super().__init__(clock)
        self._users: dict[str, UserRecord] = {}
        self._contacts: dict[str, ContactRecord] = {}
        self._activities: dict[str, ActivityRecord] = {}

    # Users

    async def get_user(self, user_id: str) -> UserRecord | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    async def create_user(self, data: UserCreate) -> UserRecord:
        user = UserRecord(id=new_id(), username=data.username, password=data.password)
        self._users[user.id] = user
        logger.debug("Created user %s", user.id)
        return user

    # Contacts

    async def get_contacts(
        self, filters: ContactFilters | None = None
    ) -> list[ContactRecord]:
        filters = filters or ContactFilters()
        contacts = list(self._contacts.values())

        term = filters.search_term
        if term:
            contacts = [c for c in contacts if matches_search(c, term)]

        company = filters.company_value
        if company:
            contacts = [c for c in contacts if c.company == company]

        status = filters.status_value
        if status:
            contacts = [c for c in contacts if c.status == status]

        # sorted() is stable, so ties keep insertion order
        return sorted(contacts, key=lambda c: c.updated_at, reverse=True)

    async def get_contact(self, contact_id: str) -> ContactRecord | None:
        return self._contacts.get(contact_id)

    async def get_contact_by_email(self, email: str) -> ContactRecord | None:
        return next((c for c in self._contacts.values() if c.email == email), None)

    async def create_contact(self, data: ContactCreate) -> ContactRecord:
        now = self.now()
        contact = ContactRecord(
            id=new_id(),
            name=data.name,
            email=data.email,
            phone=data.phone or None,
            company=data.company or None,
            title=data.title or None,
            status=data.status,
            notes=data.notes or None,
            created_at=now,
            updated_at=now,
        )
        self._contacts[contact.id] = contact
        logger.debug("Created contact %s", contact.id)
        return contact

    async def update_contact(
        self, contact_id: str, data: ContactUpdate
    ) -> ContactRecord | None:
        existing = self._contacts.get(contact_id)
        if existing is None:
            return None
        changes = data.model_dump(exclude_unset=True)
        changes["updated_at"] = max(self.now(), existing.updated_at)
        updated = existing.model_copy(update=changes)
        self._contacts[contact_id] = updated
        logger.debug("Updated contact %s fields=%s", contact_id, sorted(changes))
        return updated

    async def delete_contact(self, contact_id: str) -> bool:
        if self._contacts.pop(contact_id, None) is None:
            return False
        orphaned = [
            activity_id
            for activity_id, activity in self._activities.items()
            if activity.contact_id == contact_id
        ]
        for activity_id in orphaned:
            del self._activities[activity_id]
        logger.info(
            "Deleted contact %s and %d related activities", contact_id, len(orphaned)
        )
        return True

    # Activities

    async def get_activities(self, contact_id: str | None = None) -> list[ActivityRecord]:
        activities = list(self._activities.values())
        if contact_id:
            activities = [a for a in activities if a.contact_id == contact_id]
        return sorted(activities, key=lambda a: a.created_at, reverse=True)

    async def create_activity(self, data: ActivityCreate) -> ActivityRecord:
        activity = ActivityRecord(
            id=new_id(),
            contact_id=data.contact_id,
            type=data.type,
            title=data.title,
            description=data.description or None,
            scheduled_at=data.scheduled_at or None,
            completed_at=data.completed_at or None,
            created_at=self.now(),
        )
        self._activities[activity.id] = activity
        logger.debug("Created activity %s for contact %s", activity.id, activity.contact_id)
        return activity

    # Dashboard

    async def get_metrics(self) -> Metrics:
        contacts = list(self._contacts.values())
        start, end = day_bounds(self.now())

        total = len(contacts)
        active = sum(1 for c in contacts if c.status == ACTIVE)
        return Metrics(
            total_contacts=total,
            active_leads=sum(1 for c in contacts if c.status == PROSPECT),
            today_activities=sum(
                1 for a in self._activities.values() if start <= a.created_at < end
            ),
            conversion_rate=conversion_rate(active, total),
        )
