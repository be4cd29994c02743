"""Async test fixtures for ContactDesk, run against both storage backends."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from contactdesk.app import create_app
from contactdesk.config import ContactDeskSettings
from contactdesk.schemas import ActivityCreate, ContactCreate
from contactdesk.storage import MemStorage, SqlStorage


class FakeClock:
    """Manually advanced clock handed to storage instead of datetime.now."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def set(self, value: datetime) -> None:
        self.current = value

    def advance(self, **kwargs) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 14, 9, 30))


@pytest_asyncio.fixture(params=["memory", "sql"])
async def storage(request, clock):
    if request.param == "memory":
        store = MemStorage(clock=clock)
    else:
        store = SqlStorage.from_url("sqlite+aiosqlite:///:memory:", clock=clock)
    await store.init()
    yield store
    await store.close()


@pytest_asyncio.fixture
async def client(storage):
    """HTTPX async test client against an app wired to the test storage."""
    app = create_app(ContactDeskSettings(log_level="WARNING"), storage=storage)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def make_contact(storage, clock):
    """Create a contact, advancing the clock so updated_at values differ."""

    async def _make(name: str, email: str | None = None, **kwargs):
        clock.advance(minutes=1)
        email = email or f"{name.lower().replace(' ', '.')}@example.com"
        return await storage.create_contact(ContactCreate(name=name, email=email, **kwargs))

    return _make


@pytest.fixture
def make_activity(storage, clock):
    async def _make(contact_id: str, title: str = "Intro call", type: str = "call", **kwargs):
        clock.advance(minutes=1)
        return await storage.create_activity(
            ActivityCreate(contact_id=contact_id, type=type, title=title, **kwargs)
        )

    return _make
