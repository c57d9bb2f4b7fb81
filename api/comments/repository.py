"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_comments(recommendation_id: int) -> list[dict[str, Any]]:
    """
    Comments on one recommendation, joined with the commenter's name and
    faculty flag, newest first.
    """
    return await db.fetch_all(
        """
        SELECT
          c.comment_id,
          c.date,
          c.body,
          c.user_id,
          u.name,
          u.is_faculty,
          c.recommendation_id,
          c.is_like,
          c.is_dislike
        FROM comments c
        JOIN users u ON c.user_id = u.user_id
        WHERE c.recommendation_id = $1
        ORDER BY c.date DESC
        """,
        recommendation_id,
    )


async def create_comment(
    recommendation_id: int,
    *,
    body: str | None,
    user_id: int | None,
    is_like: bool,
    is_dislike: bool,
) -> None:
    await db.execute(
        """
        INSERT INTO comments (body, user_id, recommendation_id, is_like, is_dislike)
        VALUES ($1, $2, $3, $4, $5)
        """,
        body,
        user_id,
        recommendation_id,
        is_like,
        is_dislike,
    )


async def delete_all_comments() -> dict[str, Any] | None:
    return await db.fetch_one("DELETE FROM comments RETURNING *")


async def delete_comment(recommendation_id: int, comment_id: int) -> dict[str, Any] | None:
    return await db.fetch_one(
        """
        DELETE FROM comments
        WHERE recommendation_id = $1
          AND comment_id = $2
        RETURNING *
        """,
        recommendation_id,
        comment_id,
    )
