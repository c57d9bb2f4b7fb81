"""
Tag persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_tags() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM tags")


async def create_tag(recommendation_id: int, *, name: str | None) -> None:
    await db.execute(
        """
        INSERT INTO tags (name, recommendation_id)
        VALUES ($1, $2)
        """,
        name,
        recommendation_id,
    )
