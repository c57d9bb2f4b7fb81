"""
Async database access helpers (raw SQL) using asyncpg.

This module owns the connection pool. FastAPI initializes it on startup and
closes it on shutdown (see `api/main.py`).

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...

Every driver failure raised by the helpers below is re-raised as `StoreError`,
so routers only ever have one failure kind to catch.
"""

from __future__ import annotations

import asyncio
import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

_pool: asyncpg.Pool | None = None

_DRIVER_ERRORS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError, asyncio.TimeoutError)

# asyncpg attribute name -> key in the error detail sent to clients.
_DETAIL_FIELDS = {
    "sqlstate": "code",
    "severity": "severity",
    "detail": "detail",
    "hint": "hint",
    "constraint_name": "constraint",
    "table_name": "table",
    "column_name": "column",
}


class StoreError(RuntimeError):
    """
    A store operation failed (constraint violation, lost connection, bad SQL...).
    """

    def __init__(self, message: str, *, detail: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {"name": type(self).__name__, "message": message}

    @classmethod
    def from_exception(cls, exc: BaseException) -> "StoreError":
        message = str(exc) or type(exc).__name__
        detail: dict[str, Any] = {"name": type(exc).__name__, "message": message}
        for attr, key in _DETAIL_FIELDS.items():
            value = getattr(exc, attr, None)
            if value is not None:
                detail[key] = str(value)
        return cls(message, detail=detail)


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def ssl_setting() -> str | bool:
    # LOCAL set -> plain connection to a local DB; otherwise hosted DB over
    # SSL without certificate verification.
    if os.environ.get("LOCAL", "").strip():
        return False
    return "require"


async def init_pool() -> None:
    global _pool
    if _pool is not None:
        return None
    _pool = await asyncpg.create_pool(
        dsn=database_url(),
        ssl=ssl_setting(),
        min_size=_env_int("DB_POOL_MIN_SIZE", 1),
        max_size=_env_int("DB_POOL_MAX_SIZE", 5),
        command_timeout=_env_int("DB_COMMAND_TIMEOUT", 30),
    )


async def close_pool() -> None:
    global _pool
    if _pool is None:
        return None
    await _pool.close()
    _pool = None


def pool() -> asyncpg.Pool:
    if _pool is None:
        raise StoreError("DB pool is not initialized. Call init_pool() on startup.")
    return _pool


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


async def fetch_one(sql: str, *args: Any) -> dict[str, Any] | None:
    """
    Run a query and return a single row as a dict (or None).

    For `DELETE ... RETURNING *` the whole statement still runs; only the
    first returned row is kept.
    """
    try:
        row = await pool().fetchrow(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise StoreError.from_exception(exc) from exc
    return _record_to_dict(row) if row is not None else None


async def fetch_all(sql: str, *args: Any) -> list[dict[str, Any]]:
    """
    Run a query and return all rows as a list of dicts.
    """
    try:
        rows = await pool().fetch(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise StoreError.from_exception(exc) from exc
    return [_record_to_dict(r) for r in rows]


async def execute(sql: str, *args: Any) -> None:
    """
    Run a statement (INSERT/UPDATE/DELETE). No result returned.
    """
    try:
        await pool().execute(sql, *args)
    except _DRIVER_ERRORS as exc:
        raise StoreError.from_exception(exc) from exc
