"""Dashboard metrics schema."""

from __future__ import annotations

from .base import CamelModel


class Metrics(CamelModel):
    total_contacts: int = 0
    active_leads: int = 0
    today_activities: int = 0
    conversion_rate: float = 0
