"""Service layer for Person Enrichment Service."""

from .person_service import PersonNotFoundError, PersonService

__all__ = ["PersonNotFoundError", "PersonService"]
