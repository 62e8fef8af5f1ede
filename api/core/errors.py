"""
Exception handlers that shape error responses.

All client errors use a `detail` message; validation failures also carry the
per-field list under `errors`.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .validation import FieldError, ValidationFailed

logger = logging.getLogger(__name__)


def _field_name(loc: tuple | list) -> str:
    # Drop the leading "body"/"path" segment FastAPI adds.
    parts = [str(p) for p in loc[1:]] if len(loc) > 1 else [str(p) for p in loc]
    return ".".join(parts)


def _validation_response(errors: list[FieldError]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": errors[0].message,
            "errors": [e.to_dict() for e in errors],
        },
    )


async def validation_failed_handler(_: Request, exc: ValidationFailed) -> JSONResponse:
    logger.info("validation_failed fields=%s", ",".join(e.field for e in exc.errors))
    return _validation_response(exc.errors)


async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        FieldError(field=_field_name(err.get("loc") or ()), message=str(err.get("msg") or "Invalid value."))
        for err in exc.errors()
    ]
    if not errors:
        errors = [FieldError(field="body", message="Invalid request body.")]
    logger.info("request_invalid fields=%s", ",".join(e.field for e in errors))
    return _validation_response(errors)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
