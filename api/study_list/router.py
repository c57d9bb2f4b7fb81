"""
Study list API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core import db, responses

from . import repository

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/study_list/{user_id}")
async def list_study_list(user_id: int) -> JSONResponse:
    """
    Recommendations saved by one user.
    """
    try:
        rows = await repository.list_entries(user_id)
    except db.StoreError as exc:
        logger.exception("list_study_list_failed user_id=%s", user_id)
        return responses.failed(404, exc)
    return responses.success(200, rows)


@router.post("/study_list/{user_id}/{recommendation_id}")
async def add_to_study_list(user_id: int, recommendation_id: int) -> JSONResponse:
    logger.info("add_to_study_list user_id=%s recommendation_id=%s", user_id, recommendation_id)
    try:
        await repository.add_entry(user_id, recommendation_id)
    except db.StoreError as exc:
        logger.exception("add_to_study_list_failed user_id=%s", user_id)
        return responses.failed(400, exc)
    return responses.success(201)


@router.delete("/study_list/{user_id}/{recommendation_id}")
async def remove_from_study_list(user_id: int, recommendation_id: int) -> JSONResponse:
    logger.info(
        "remove_from_study_list user_id=%s recommendation_id=%s",
        user_id,
        recommendation_id,
    )
    try:
        await repository.remove_entry(user_id, recommendation_id)
    except db.StoreError as exc:
        logger.exception("remove_from_study_list_failed user_id=%s", user_id)
        return responses.failed(400, exc)
    return responses.success(201)
