"""
Stage API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core import db, responses

from . import repository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stages")
async def list_stages() -> JSONResponse:
    try:
        rows = await repository.list_stages()
    except db.StoreError as exc:
        logger.exception("list_stages_failed")
        return responses.failed(404, exc)
    return responses.success(200, rows)
