"""ContactDesk schemas."""

from .base import CamelModel
from .user import UserCreate, UserRecord
from .contact import ContactCreate, ContactUpdate, ContactRecord, ContactFilters
from .activity import ActivityCreate, ActivityRecord
from .metrics import Metrics

__all__ = [
    "CamelModel",
    "UserCreate",
    "UserRecord",
    "ContactCreate",
    "ContactUpdate",
    "ContactRecord",
    "ContactFilters",
    "ActivityCreate",
    "ActivityRecord",
    "Metrics",
]
