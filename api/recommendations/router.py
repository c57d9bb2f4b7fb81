"""
Recommendation API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core import db, responses

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/recommendations")
async def list_recommendations() -> JSONResponse:
    """
    All recommendations, newest first.
    """
    try:
        rows = await repository.list_recommendations()
    except db.StoreError as exc:
        logger.exception("list_recommendations_failed")
        return responses.failed(404, exc)
    return responses.success(200, rows)


@router.post("/recommendations")
async def create_recommendation(
    payload: schemas.CreateRecommendationRequest | None = None,
) -> JSONResponse:
    payload = payload or schemas.CreateRecommendationRequest()
    logger.info("create_recommendation user_id=%s stage_id=%s", payload.user_id, payload.stage_id)
    try:
        row = await repository.create_recommendation(**payload.model_dump())
    except db.StoreError as exc:
        logger.exception("create_recommendation_failed")
        return responses.failed(400, exc)
    return responses.success(201, row)


@router.delete("/recommendations/{recommendation_id}")
async def delete_recommendation(recommendation_id: int) -> JSONResponse:
    logger.info("delete_recommendation recommendation_id=%s", recommendation_id)
    try:
        deleted = await repository.delete_recommendation(recommendation_id)
    except db.StoreError:
        logger.exception("delete_recommendation_failed recommendation_id=%s", recommendation_id)
        return responses.failed(404)
    if not deleted:
        return responses.failed(404)
    return responses.success(201)


@router.delete("/recommendations")
async def delete_all_recommendations() -> JSONResponse:
    logger.info("delete_all_recommendations")
    try:
        await repository.delete_all_recommendations()
    except db.StoreError:
        logger.exception("delete_all_recommendations_failed")
        return responses.failed(404)
    return responses.success(201)
