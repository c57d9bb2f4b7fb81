"""
Pydantic schemas for tag endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateTagRequest(BaseModel):
    name: str | None = None
