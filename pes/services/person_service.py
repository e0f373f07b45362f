"""Person resource operations."""

import logging
from typing import List

from pes.core.models import Person, PersonPayload
from pes.database import PersonDatabase
from pes.enrichment import Enricher

logger = logging.getLogger(__name__)


class PersonNotFoundError(LookupError):
    def __init__(self, person_id: int):
        super().__init__(f"Person not found: {person_id}")
        self.person_id = person_id


class PersonService:
    """CRUD over people, enriching the derived fields on every write.

    Derived fields always come from the name being written. Create and update
    both run a full enrichment; there is no path that keeps previously derived
    values.
    """

    def __init__(self, database: PersonDatabase, enricher: Enricher):
        self.database = database
        self.enricher = enricher

    async def create_person(self, payload: PersonPayload) -> Person:
        enrichment = await self.enricher.enrich(payload.name)
        person = await self.database.create_person(payload, enrichment)
        logger.info("Created person %s (%r)", person.id, person.name)
        return person

    async def update_person(self, person_id: int, payload: PersonPayload) -> Person:
        if await self.database.get_person(person_id) is None:
            raise PersonNotFoundError(person_id)

        enrichment = await self.enricher.enrich(payload.name)
        person = await self.database.update_person(person_id, payload, enrichment)
        # Deleted while the lookups were in flight
        if person is None:
            raise PersonNotFoundError(person_id)
        logger.info("Updated person %s (%r)", person.id, person.name)
        return person

    async def get_person(self, person_id: int) -> Person:
        person = await self.database.get_person(person_id)
        if person is None:
            raise PersonNotFoundError(person_id)
        return person

    async def list_people(self, limit: int = 100, offset: int = 0) -> List[Person]:
        return await self.database.list_people(limit=limit, offset=offset)

    async def count_people(self) -> int:
        return await self.database.count_people()

    async def delete_person(self, person_id: int) -> None:
        if not await self.database.delete_person(person_id):
            raise PersonNotFoundError(person_id)
        logger.info("Deleted person %s", person_id)
