"""Activity routes - list and log activities against contacts."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Request
from pydantic import ValidationError

from ..deps import get_storage
from ..responses import field_error, invalid_response, message_response, validation_errors
from ..schemas import ActivityCreate, ActivityRecord
from ..storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["activities"])

INVALID = "Invalid activity data"


@router.get("/activities", response_model=list[ActivityRecord])
async def list_activities(
    contact_id: str | None = Query(None, alias="contactId"),
    storage: Storage = Depends(get_storage),
):
    try:
        return await storage.get_activities(contact_id)
    except Exception:
        logger.exception("Failed to fetch activities")
        return message_response(500, "Failed to fetch activities")


@router.post("/activities", status_code=201, response_model=ActivityRecord)
async def create_activity(request: Request, storage: Storage = Depends(get_storage)):
    try:
        data = ActivityCreate.model_validate_json(await request.body())
    except ValidationError as exc:
        return invalid_response(INVALID, validation_errors(exc))

    try:
        if await storage.get_contact(data.contact_id) is None:
            return invalid_response(
                INVALID, [field_error("contactId", "Contact does not exist", "foreign_key")]
            )
        activity = await storage.create_activity(data)
    except Exception:
        logger.exception("Failed to create activity")
        return message_response(500, "Failed to create activity")
    logger.info("Activity %s logged for contact %s", activity.id, activity.contact_id)
    return activity
