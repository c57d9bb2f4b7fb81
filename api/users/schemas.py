"""
Pydantic schemas for user endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateUserRequest(BaseModel):
    name: str | None = None
    is_faculty: bool | None = None
