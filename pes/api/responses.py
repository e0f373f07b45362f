"""API response models."""

from typing import List

from pydantic import BaseModel

from pes.core.models import CursorPage, Person


class PersonListResponse(BaseModel):
    results: List[Person]
    page: CursorPage


class MessageResponse(BaseModel):
    message: str
