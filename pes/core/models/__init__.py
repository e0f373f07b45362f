"""Models for Person Enrichment Service."""

from .base import CursorPage
from .person import Enrichment, Person, PersonPayload

__all__ = [
    "CursorPage",
    "Enrichment",
    "Person",
    "PersonPayload",
]
