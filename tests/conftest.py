"""
Shared test fixtures.

The asyncpg helpers in `core.db` are swapped for a recording fake, so router
tests can assert on the exact SQL, bind values and response envelopes
without a running PostgreSQL.
"""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from core import db
from main import app


class FakeDB:
    """Records every statement and replays queued results (or a failure)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.results: list[Any] = []
        self.error: db.StoreError | None = None

    def queue(self, *results: Any) -> None:
        self.results.extend(results)

    def fail_with(self, message: str = "boom", **detail: Any) -> db.StoreError:
        self.error = db.StoreError(
            message,
            detail={"name": "StoreError", "message": message, **detail},
        )
        return self.error

    def _run(self, kind: str, sql: str, args: tuple[Any, ...], default: Any) -> Any:
        self.calls.append((kind, " ".join(sql.split()), args))
        if self.error is not None:
            raise self.error
        if self.results:
            return self.results.pop(0)
        return default

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        return self._run("fetch_all", sql, args, [])

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        return self._run("fetch_one", sql, args, None)

    async def execute(self, sql: str, *args: Any) -> None:
        self._run("execute", sql, args, None)

    @property
    def last(self) -> tuple[str, str, tuple[Any, ...]]:
        assert self.calls, "no statement was issued"
        return self.calls[-1]


@pytest.fixture
def fake_db(monkeypatch: pytest.MonkeyPatch) -> FakeDB:
    fake = FakeDB()
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.setattr(db, "execute", fake.execute)
    return fake


@pytest.fixture
def client(fake_db: FakeDB, monkeypatch: pytest.MonkeyPatch):
    async def _noop() -> None:
        return None

    monkeypatch.setattr(db, "init_pool", _noop)
    monkeypatch.setattr(db, "close_pool", _noop)
    with TestClient(app) as test_client:
        yield test_client
