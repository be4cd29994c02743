"""Tests for dashboard metrics."""

from __future__ import annotations

from datetime import datetime

import pytest

from contactdesk.schemas import ActivityCreate, ContactUpdate, Metrics
from contactdesk.storage import conversion_rate, day_bounds


def test_day_bounds_half_open_interval():
    start, end = day_bounds(datetime(2026, 3, 14, 17, 45, 12, 500))
    assert start == datetime(2026, 3, 14)
    assert end == datetime(2026, 3, 15)


def test_day_bounds_across_month_end():
    start, end = day_bounds(datetime(2026, 2, 28, 23, 59, 59))
    assert start == datetime(2026, 2, 28)
    assert end == datetime(2026, 3, 1)


@pytest.mark.parametrize(
    ("active", "total", "expected"),
    [
        (0, 0, 0),
        (2, 4, 50.0),
        (1, 3, 33.3),
        (2, 3, 66.7),
        (1, 8, 12.5),
        (23, 80, 28.7),
        (3, 3, 100.0),
    ],
)
def test_conversion_rate(active, total, expected):
    assert conversion_rate(active, total) == expected


@pytest.mark.asyncio
async def test_metrics_empty_storage(storage):
    metrics = await storage.get_metrics()
    assert metrics == Metrics(
        total_contacts=0, active_leads=0, today_activities=0, conversion_rate=0
    )


@pytest.mark.asyncio
async def test_metrics_counts_statuses(storage, make_contact):
    for name, status in [
        ("Ann", "prospect"),
        ("Ben", "prospect"),
        ("Cat", "active"),
        ("Dov", "active"),
    ]:
        await make_contact(name, status=status)

    metrics = await storage.get_metrics()
    assert metrics.total_contacts == 4
    assert metrics.active_leads == 2
    assert metrics.conversion_rate == 50.0


@pytest.mark.asyncio
async def test_metrics_ignore_other_statuses(storage, make_contact):
    await make_contact("Eli", status="churned")
    await make_contact("Fay", status="active")

    metrics = await storage.get_metrics()
    assert metrics.total_contacts == 2
    assert metrics.active_leads == 0
    assert metrics.conversion_rate == 50.0


@pytest.mark.asyncio
async def test_metrics_follow_status_updates(storage, make_contact):
    contact = await make_contact("Gus")
    await storage.update_contact(contact.id, ContactUpdate(status="active"))

    metrics = await storage.get_metrics()
    assert metrics.active_leads == 0
    assert metrics.conversion_rate == 100.0


@pytest.mark.asyncio
async def test_today_activities_window(storage, make_contact, clock):
    contact = await make_contact("Hal")

    async def log_at(moment: datetime, title: str):
        clock.set(moment)
        await storage.create_activity(
            ActivityCreate(contact_id=contact.id, type="call", title=title)
        )

    await log_at(datetime(2026, 3, 13, 23, 59, 59), "yesterday, last second")
    await log_at(datetime(2026, 3, 14, 0, 0, 0), "today, midnight")
    await log_at(datetime(2026, 3, 14, 18, 0, 0), "today, evening")
    await log_at(datetime(2026, 3, 15, 0, 0, 0), "tomorrow, midnight")

    clock.set(datetime(2026, 3, 14, 12, 0))
    metrics = await storage.get_metrics()
    assert metrics.today_activities == 2


@pytest.mark.asyncio
async def test_deleted_contact_activities_leave_metrics(storage, make_contact, make_activity):
    contact = await make_contact("Ida")
    await make_activity(contact.id)
    assert (await storage.get_metrics()).today_activities == 1

    await storage.delete_contact(contact.id)
    metrics = await storage.get_metrics()
    assert metrics.total_contacts == 0
    assert metrics.today_activities == 0
