"""Person models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ..constraints import MAX_INT32, MAX_NAME_LENGTH


class PersonPayload(BaseModel):
    """User-supplied person fields accepted on create and update.

    Derived fields or an ``id`` sent back by a client are ignored; they are
    never taken from input.
    """

    model_config = {"extra": "ignore", "strict": True}

    name: str = Field(
        ..., max_length=MAX_NAME_LENGTH, description="First name, used for enrichment"
    )
    surname: str = Field("", max_length=MAX_NAME_LENGTH, description="Family name")
    patronymic: str = Field(
        "", max_length=MAX_NAME_LENGTH, description="Patronymic, if any"
    )


class Enrichment(BaseModel):
    """Age, gender and nationality guesses derived from a first name."""

    model_config = {"frozen": True}

    age: int = Field(0, ge=0, le=MAX_INT32, description="Estimated age, 0 when unknown")
    gender: str = Field("", description="Estimated gender, empty when unknown")
    nationality: str = Field(
        "", description="Most likely country code, empty when unknown"
    )


class Person(BaseModel):
    """A stored person record."""

    id: int = Field(..., description="Store-assigned identifier")
    name: str
    surname: str = ""
    patronymic: str = ""
    age: int = 0
    gender: str = ""
    nationality: str = ""
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
