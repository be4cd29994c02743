"""ContactDesk models - re-exports all models and Base.metadata."""

from .base import Base, UUIDMixin, CreatedAtMixin, TimestampMixin
from .user import User
from .contact import Contact
from .activity import Activity

__all__ = [
    "Base",
    "UUIDMixin",
    "CreatedAtMixin",
    "TimestampMixin",
    "User",
    "Contact",
    "Activity",
]
