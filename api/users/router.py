"""
User API endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core import db, responses

from . import repository, schemas

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users")
async def list_users() -> JSONResponse:
    try:
        rows = await repository.list_users()
    except db.StoreError as exc:
        logger.exception("list_users_failed")
        return responses.failed(404, exc)
    return responses.success(200, rows)


@router.post("/users")
async def create_user(payload: schemas.CreateUserRequest | None = None) -> JSONResponse:
    payload = payload or schemas.CreateUserRequest()
    logger.info("create_user name=%s", payload.name)
    try:
        await repository.create_user(name=payload.name, is_faculty=payload.is_faculty)
    except db.StoreError as exc:
        logger.exception("create_user_failed")
        return responses.failed(400, exc)
    return responses.success(201)


@router.delete("/users/{user_id}")
async def delete_user(user_id: int) -> JSONResponse:
    logger.info("delete_user user_id=%s", user_id)
    try:
        await repository.delete_user_by_id(user_id)
    except db.StoreError:
        logger.exception("delete_user_failed user_id=%s", user_id)
        return responses.failed(404)
    return responses.success(201)


@router.delete("/users/name/{name}")
async def delete_user_by_name(name: str) -> JSONResponse:
    logger.info("delete_user_by_name name=%s", name)
    try:
        await repository.delete_user_by_name(name)
    except db.StoreError:
        logger.exception("delete_user_by_name_failed name=%s", name)
        return responses.failed(404)
    return responses.success(201)
