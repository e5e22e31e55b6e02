# app/core/errors.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

logger = logging.getLogger(__name__)


class CustomerNotFound(Exception):
    def __init__(self, key: str | None = None):
        super().__init__(f"Customer not found: {key}")
        self.key = key


def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"error": exc.detail},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def _field_name(loc) -> str:
    parts = [p for p in loc if p != "body"]
    # json_invalid даёт loc=("body", <позиция>): это не поле
    if not parts or not isinstance(parts[0], str):
        return "body"
    return ".".join(str(p) for p in parts)


def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    fields = [
        {
            "field": _field_name(err.get("loc", ())),
            "message": err.get("msg", ""),
            "type": err.get("type", ""),
        }
        for err in exc.errors()
    ]
    return JSONResponse({"error": "Invalid request", "fields": fields}, status_code=422)


def _not_found(request: Request, exc: CustomerNotFound) -> JSONResponse:
    return JSONResponse({"error": "Customer not found"}, status_code=404)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(CustomerNotFound, _not_found)
