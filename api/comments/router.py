"""
Comment API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core import db, responses

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()

# Registered last by main.py: its first path segment is a parameter.
scoped_router = APIRouter()


@router.get("/comments/{recommendation_id}")
async def list_comments(recommendation_id: int) -> JSONResponse:
    try:
        rows = await repository.list_comments(recommendation_id)
    except db.StoreError as exc:
        logger.exception("list_comments_failed recommendation_id=%s", recommendation_id)
        return responses.failed(404, exc)
    return responses.success(200, rows)


@router.post("/comments/{recommendation_id}")
async def create_comment(
    recommendation_id: int,
    payload: schemas.CreateCommentRequest | None = None,
) -> JSONResponse:
    payload = payload or schemas.CreateCommentRequest()
    logger.info(
        "create_comment recommendation_id=%s user_id=%s",
        recommendation_id,
        payload.user_id,
    )
    try:
        await repository.create_comment(
            recommendation_id,
            body=payload.body,
            user_id=payload.user_id,
            is_like=payload.is_like,
            is_dislike=payload.is_dislike,
        )
    except db.StoreError as exc:
        logger.exception("create_comment_failed recommendation_id=%s", recommendation_id)
        return responses.failed(400, exc)
    return responses.success(201)


@router.delete("/comments")
async def delete_all_comments() -> JSONResponse:
    logger.info("delete_all_comments")
    try:
        row = await repository.delete_all_comments()
    except db.StoreError as exc:
        logger.exception("delete_all_comments_failed")
        return responses.failed(400, exc)
    return responses.success(201, row)


@scoped_router.delete("/{recommendation_id}/comments/{comment_id}")
async def delete_comment(recommendation_id: int, comment_id: int) -> JSONResponse:
    logger.info(
        "delete_comment recommendation_id=%s comment_id=%s",
        recommendation_id,
        comment_id,
    )
    try:
        row = await repository.delete_comment(recommendation_id, comment_id)
    except db.StoreError as exc:
        logger.exception(
            "delete_comment_failed recommendation_id=%s comment_id=%s",
            recommendation_id,
            comment_id,
        )
        return responses.failed(400, exc)
    return responses.success(201, row)
