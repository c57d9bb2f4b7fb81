"""
Recommendation persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_recommendations() -> list[dict[str, Any]]:
    return await db.fetch_all(
        """
        SELECT *
        FROM recommendations
        ORDER BY time DESC
        """
    )


async def create_recommendation(
    *,
    title: str | None,
    author: str | None,
    url: str | None,
    description: str | None,
    content: str | None,
    recommended_description: str | None,
    recommended: bool | None,
    stage_id: int | None,
    user_id: int | None,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        INSERT INTO recommendations (
          title, author, url, description, content,
          recommended_description, recommended, stage_id, user_id
        )
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8, $9)
        RETURNING *
        """,
        title,
        author,
        url,
        description,
        content,
        recommended_description,
        recommended,
        stage_id,
        user_id,
    )


async def delete_recommendation(recommendation_id: int) -> bool:
    """
    Delete one recommendation. Returns False when no row matched.
    """
    row = await db.fetch_one(
        """
        DELETE FROM recommendations
        WHERE recommendation_id = $1
        RETURNING recommendation_id
        """,
        recommendation_id,
    )
    return row is not None


async def delete_all_recommendations() -> None:
    await db.execute("DELETE FROM recommendations")
