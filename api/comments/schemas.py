"""
Pydantic schemas for comment endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

# Values that leave a reaction flag unset. Anything else goes through
# pydantic's bool parsing, so lists, dicts and unknown strings are rejected.
_UNSET_FLAG_VALUES = (None, False, 0, "")


class CreateCommentRequest(BaseModel):
    body: str | None = None
    user_id: int | None = None
    is_like: bool = False
    is_dislike: bool = False

    @field_validator("is_like", "is_dislike", mode="before")
    @classmethod
    def _unset_to_false(cls, value: Any) -> Any:
        if value in _UNSET_FLAG_VALUES:
            return False
        return value
