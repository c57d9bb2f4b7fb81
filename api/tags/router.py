"""
Tag API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core import db, responses

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/tags")
async def list_tags() -> JSONResponse:
    try:
        rows = await repository.list_tags()
    except db.StoreError as exc:
        logger.exception("list_tags_failed")
        return responses.failed(404, exc)
    return responses.success(200, rows)


@router.post("/tags/{recommendation_id}")
async def create_tag(
    recommendation_id: int,
    payload: schemas.CreateTagRequest | None = None,
) -> JSONResponse:
    payload = payload or schemas.CreateTagRequest()
    logger.info("create_tag recommendation_id=%s name=%s", recommendation_id, payload.name)
    try:
        await repository.create_tag(recommendation_id, name=payload.name)
    except db.StoreError as exc:
        logger.exception("create_tag_failed recommendation_id=%s", recommendation_id)
        return responses.failed(400, exc)
    return responses.success(201)
