"""Health and readiness checks."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..deps import get_storage
from ..storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check():
    return {"status": "healthy", "service": "contactdesk"}


@router.get("/ready")
async def readiness_check(storage: Storage = Depends(get_storage)):
    try:
        await storage.ping()
    except Exception:
        logger.warning("Storage readiness check failed", exc_info=True)
        return JSONResponse(
            status_code=503, content={"status": "not_ready", "service": "contactdesk"}
        )
    return {"status": "ready", "service": "contactdesk"}
