"""
Pydantic schemas for recommendation endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class CreateRecommendationRequest(BaseModel):
    # Missing fields bind as NULL; NOT NULL columns are enforced by the store.
    title: str | None = None
    author: str | None = None
    url: str | None = None
    description: str | None = None
    content: str | None = None
    recommended_description: str | None = None
    recommended: bool | None = None
    stage_id: int | None = None
    user_id: int | None = None
