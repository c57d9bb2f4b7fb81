"""
Stage lookups. Stages are reference data and read-only through this API.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_stages() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM stages")
