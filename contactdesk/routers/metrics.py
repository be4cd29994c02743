"""Dashboard metrics route."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ..deps import get_storage
from ..responses import message_response
from ..schemas import Metrics
from ..storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/metrics", response_model=Metrics)
async def get_metrics(storage: Storage = Depends(get_storage)):
    try:
        return await storage.get_metrics()
    except Exception:
        logger.exception("Failed to fetch metrics")
        return message_response(500, "Failed to fetch metrics")
