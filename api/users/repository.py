"""
User persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_users() -> list[dict[str, Any]]:
    return await db.fetch_all("SELECT * FROM users")


async def create_user(*, name: str | None, is_faculty: bool | None) -> None:
    await db.execute(
        """
        INSERT INTO users (name, is_faculty)
        VALUES ($1, $2)
        """,
        name,
        is_faculty,
    )


async def delete_user_by_id(user_id: int) -> None:
    await db.execute(
        """
        DELETE FROM users
        WHERE user_id = $1
        """,
        user_id,
    )


async def delete_user_by_name(name: str) -> None:
    """
    Delete the user(s) with this exact name. Succeeds even when none matched.
    """
    await db.execute(
        """
        DELETE FROM users
        WHERE name = $1
        """,
        name,
    )
