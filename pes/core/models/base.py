"""Base models using Pydantic."""

from pydantic import BaseModel


class CursorPage(BaseModel):
    model_config = {"extra": "forbid"}

    hasMore: bool
    offset: int = 0
    count: int
