"""
Response envelope shared by every endpoint:

    {"status": "success" | "failed", "data"?: ..., "error"?: ...}

`data` is left out when there is nothing to return, `error` when the failure
detail is not echoed back.
"""

from __future__ import annotations

from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from . import db


def success(status_code: int, data: Any = None) -> JSONResponse:
    content: dict[str, Any] = {"status": "success"}
    if data is not None:
        content["data"] = data
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def failed(status_code: int, exc: db.StoreError | None = None) -> JSONResponse:
    content: dict[str, Any] = {"status": "failed"}
    if exc is not None:
        content["error"] = exc.detail
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def invalid_input(exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"status": "failed", "error": exc.errors()}),
    )
