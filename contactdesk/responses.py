"""JSON error bodies shared by the API routers.

Every error carries a human-readable ``message``; validation failures also
carry ``errors``, one entry per violated field/rule.
"""

from __future__ import annotations

from typing import Any

from fastapi.responses import JSONResponse
from pydantic import ValidationError


def field_error(field: str, msg: str, error_type: str) -> dict[str, Any]:
    return {"loc": [field], "msg": msg, "type": error_type}


def validation_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten pydantic errors to JSON-safe loc/msg/type entries."""
    return [
        {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def invalid_response(message: str, errors: list[dict[str, Any]]) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": message, "errors": errors})


def not_found(entity: str) -> JSONResponse:
    return message_response(404, f"{entity} not found")
