"""SQLAlchemy-backed storage with the same contract as MemStorage."""

from __future__ import annotations

import logging

from sqlalchemy import delete, func, select, text
from sqlalchemy.ext.asyncio import AsyncEngine

from ..database import build_engine, build_session_factory
from ..models import Activity, Base, Contact, User
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


class SqlStorage(Storage):
    """Durable storage over an async SQLAlchemy engine.

    Every mutation runs in a single transaction; the contact cascade deletes
    activities explicitly so SQLite without foreign key enforcement behaves
    the same as PostgreSQL.
    """

    def __init__(self, engine: AsyncEngine, clock: Clock | None = None):
        super().__init__(clock)
        self.engine = engine
        self._session_factory = build_session_factory(engine)

    @classmethod
    def from_url(
        cls, database_url: str, *, echo: bool = False, clock: Clock | None = None
    ) -> SqlStorage:
        return cls(build_engine(database_url, echo=echo), clock=clock)

    async def init(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def ping(self) -> None:
        async with self._session_factory() as session:
            await session.execute(text("SELECT 1"))

    # Users

    async def get_user(self, user_id: str) -> UserRecord | None:
        async with self._session_factory() as session:
            user = await session.get(User, user_id)
            return UserRecord.model_validate(user) if user else None

    async def get_user_by_username(self, username: str) -> UserRecord | None:
        stmt = select(User).where(User.username == username).limit(1)
        async with self._session_factory() as session:
            user = (await session.execute(stmt)).scalar_one_or_none()
            return UserRecord.model_validate(user) if user else None

    async def create_user(self, data: UserCreate) -> UserRecord:
        user = User(id=new_id(), username=data.username, password=data.password)
        async with self._session_factory.begin() as session:
            session.add(user)
        logger.debug("Created user %s", user.id)
        return UserRecord.model_validate(user)

    # Contacts

    async def get_contacts(
        self, filters: ContactFilters | None = None
    ) -> list[ContactRecord]:
        filters = filters or ContactFilters()
        stmt = select(Contact)

        company = filters.company_value
        if company:
            stmt = stmt.where(Contact.company == company)

        status = filters.status_value
        if status:
            stmt = stmt.where(Contact.status == status)

        stmt = stmt.order_by(
            Contact.updated_at.desc(), Contact.created_at.desc(), Contact.id
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            contacts = [ContactRecord.model_validate(c) for c in result.scalars().all()]

        # SQLite lower() only folds ASCII, so the search runs in Python
        term = filters.search_term
        if term:
            contacts = [c for c in contacts if matches_search(c, term)]
        return contacts

    async def get_contact(self, contact_id: str) -> ContactRecord | None:
        async with self._session_factory() as session:
            contact = await session.get(Contact, contact_id)
            return ContactRecord.model_validate(contact) if contact else None

    async def get_contact_by_email(self, email: str) -> ContactRecord | None:
        stmt = select(Contact).where(Contact.email == email).limit(1)
        async with self._session_factory() as session:
            contact = (await session.execute(stmt)).scalar_one_or_none()
            return ContactRecord.model_validate(contact) if contact else None

    async def create_contact(self, data: ContactCreate) -> ContactRecord:
        now = self.now()
        contact = Contact(
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
        async with self._session_factory.begin() as session:
            session.add(contact)
        logger.debug("Created contact %s", contact.id)
        return ContactRecord.model_validate(contact)

    async def update_contact(
        self, contact_id: str, data: ContactUpdate
    ) -> ContactRecord | None:
        changes = data.model_dump(exclude_unset=True)
        async with self._session_factory.begin() as session:
            contact = await session.get(Contact, contact_id)
            if contact is None:
                return None
            for key, value in changes.items():
                setattr(contact, key, value)
            contact.updated_at = max(self.now(), contact.updated_at)
        logger.debug("Updated contact %s fields=%s", contact_id, sorted(changes))
        return ContactRecord.model_validate(contact)

    async def delete_contact(self, contact_id: str) -> bool:
        async with self._session_factory.begin() as session:
            contact = await session.get(Contact, contact_id)
            if contact is None:
                return False
            result = await session.execute(
                delete(Activity).where(Activity.contact_id == contact_id)
            )
            await session.execute(delete(Contact).where(Contact.id == contact_id))
        logger.info(
            "Deleted contact %s and %d related activities", contact_id, result.rowcount
        )
        return True

    # Activities

    async def get_activities(self, contact_id: str | None = None) -> list[ActivityRecord]:
        stmt = select(Activity)
        if contact_id:
            stmt = stmt.where(Activity.contact_id == contact_id)
        stmt = stmt.order_by(Activity.created_at.desc(), Activity.id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [ActivityRecord.model_validate(a) for a in result.scalars().all()]

    async def create_activity(self, data: ActivityCreate) -> ActivityRecord:
        activity = Activity(
            id=new_id(),
            contact_id=data.contact_id,
            type=data.type,
            title=data.title,
            description=data.description or None,
            scheduled_at=data.scheduled_at or None,
            completed_at=data.completed_at or None,
            created_at=self.now(),
        )
        async with self._session_factory.begin() as session:
            session.add(activity)
        logger.debug("Created activity %s for contact %s", activity.id, activity.contact_id)
        return ActivityRecord.model_validate(activity)

    # Dashboard

    async def get_metrics(self) -> Metrics:
        start, end = day_bounds(self.now())
        async with self._session_factory() as session:
            total = (await session.execute(
                select(func.count()).select_from(Contact)
            )).scalar() or 0
            leads = (await session.execute(
                select(func.count()).where(Contact.status == PROSPECT)
            )).scalar() or 0
            active = (await session.execute(
                select(func.count()).where(Contact.status == ACTIVE)
            )).scalar() or 0
            today = (await session.execute(
                select(func.count()).where(
                    Activity.created_at >= start, Activity.created_at < end
                )
            )).scalar() or 0

        return Metrics(
            total_contacts=total,
            active_leads=leads,
            today_activities=today,
            conversion_rate=conversion_rate(active, total),
        )
