"""
Study list persistence (raw SQL).

A study list entry is keyed by (user_id, recommendation_id).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_entries(user_id: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM study_list
        WHERE user_id = $1
        """,
        user_id,
    )


async def add_entry(user_id: int, recommendation_id: int) -> None:
    await db.execute(
        """
        INSERT INTO study_list (user_id, recommendation_id)
        VALUES ($1, $2)
        """,
        user_id,
        recommendation_id,
    )


async def remove_entry(user_id: int, recommendation_id: int) -> None:
    await db.execute(
        """
        DELETE FROM study_list
        WHERE user_id = $1
          AND recommendation_id = $2
        """,
        user_id,
        recommendation_id,
    )
