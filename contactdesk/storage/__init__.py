"""Storage backends and the factory that picks one from settings."""

from __future__ import annotations

from ..config import ContactDeskSettings
from .base import Clock, Storage, conversion_rate, day_bounds, matches_search
from .memory import MemStorage
from .sql import SqlStorage


def build_storage(settings: ContactDeskSettings, clock: Clock | None = None) -> Storage:
    """Construct the backend named by ``settings.storage_backend``."""
    if settings.uses_database:
        return SqlStorage.from_url(
            settings.database_url, echo=settings.echo_sql, clock=clock
        )
    return MemStorage(clock=clock)


__all__ = [
    "Clock",
    "Storage",
    "MemStorage",
    "SqlStorage",
    "build_storage",
    "conversion_rate",
    "day_bounds",
    "matches_search",
]
