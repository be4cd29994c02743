"""Contact routes - list, detail, create, update, delete."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from ..deps import get_storage
from ..responses import (
    field_error,
    invalid_response,
    message_response,
    not_found,
    validation_errors,
)
from ..schemas import ContactCreate, ContactFilters, ContactRecord, ContactUpdate
from ..storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contacts"])

INVALID = "Invalid contact data"


def _email_taken() -> dict:
    return field_error("email", "A contact with this email already exists", "unique")


@router.get("/contacts", response_model=list[ContactRecord])
async def list_contacts(
    search: str | None = None,
    company: str | None = None,
    status: str | None = None,
    storage: Storage = Depends(get_storage),
):
    filters = ContactFilters(search=search, company=company, status=status)
    try:
        return await storage.get_contacts(filters)
    except Exception:
        logger.exception("Failed to fetch contacts")
        return message_response(500, "Failed to fetch contacts")


@router.get("/contacts/{contact_id}", response_model=ContactRecord)
async def get_contact(contact_id: str, storage: Storage = Depends(get_storage)):
    try:
        contact = await storage.get_contact(contact_id)
    except Exception:
        logger.exception("Failed to fetch contact %s", contact_id)
        return message_response(500, "Failed to fetch contact")
    if contact is None:
        return not_found("Contact")
    return contact


@router.post("/contacts", status_code=201, response_model=ContactRecord)
async def create_contact(request: Request, storage: Storage = Depends(get_storage)):
    try:
        data = ContactCreate.model_validate_json(await request.body())
    except ValidationError as exc:
        return invalid_response(INVALID, validation_errors(exc))

    try:
        if await storage.get_contact_by_email(data.email) is not None:
            return invalid_response(INVALID, [_email_taken()])
        contact = await storage.create_contact(data)
    except Exception:
        logger.exception("Failed to create contact")
        return message_response(500, "Failed to create contact")
    logger.info("Contact %s created", contact.id)
    return contact


@router.put("/contacts/{contact_id}", response_model=ContactRecord)
async def update_contact(
    contact_id: str, request: Request, storage: Storage = Depends(get_storage)
):
    try:
        data = ContactUpdate.model_validate_json(await request.body())
    except ValidationError as exc:
        return invalid_response(INVALID, validation_errors(exc))

    try:
        if await storage.get_contact(contact_id) is None:
            return not_found("Contact")
        if "email" in data.model_fields_set:
            owner = await storage.get_contact_by_email(data.email)
            if owner is not None and owner.id != contact_id:
                return invalid_response(INVALID, [_email_taken()])
        contact = await storage.update_contact(contact_id, data)
    except Exception:
        logger.exception("Failed to update contact %s", contact_id)
        return message_response(500, "Failed to update contact")
    if contact is None:
        return not_found("Contact")
    return contact


@router.delete("/contacts/{contact_id}")
async def delete_contact(contact_id: str, storage: Storage = Depends(get_storage)):
    try:
        deleted = await storage.delete_contact(contact_id)
    except Exception:
        logger.exception("Failed to delete contact %s", contact_id)
        return message_response(500, "Failed to delete contact")
    if not deleted:
        return not_found("Contact")
    return {"message": "Contact deleted successfully"}
