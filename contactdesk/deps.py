"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from .storage import Storage


def get_storage(request: Request) -> Storage:
    """Storage instance the app was constructed with."""
    return request.app.state.storage
