"""Abstract PersonDatabase class for CRUD operations."""

from abc import ABC, abstractmethod
from typing import List, Optional

from pes.core.models import Enrichment, Person, PersonPayload


class PersonDatabase(ABC):
    """Abstract base class for person storage.

    Writes take the user-supplied fields and the derived fields together so a
    row is never stored with one half missing.
    """

    @abstractmethod
    async def create_person(
        self, payload: PersonPayload, enrichment: Enrichment
    ) -> Person:
        pass

    @abstractmethod
    async def update_person(
        self, person_id: int, payload: PersonPayload, enrichment: Enrichment
    ) -> Optional[Person]:
        pass

    @abstractmethod
    async def get_person(self, person_id: int) -> Optional[Person]:
        pass

    @abstractmethod
    async def delete_person(self, person_id: int) -> bool:
        pass

    @abstractmethod
    async def list_people(self, limit: int = 100, offset: int = 0) -> List[Person]:
        pass

    @abstractmethod
    async def count_people(self) -> int:
        pass
