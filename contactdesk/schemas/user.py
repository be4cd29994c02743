"""User schemas."""

from __future__ import annotations

from pydantic import ConfigDict

from .base import CamelModel


class UserCreate(CamelModel):
    username: str
    password: str


class UserRecord(UserCreate):
    model_config = ConfigDict(frozen=True)

    id: str
