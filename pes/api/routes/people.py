"""Person endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Path, Query

from pes.config import Config
from pes.core.constraints import MAX_INT32
from pes.core.models import CursorPage, Person, PersonPayload
from pes.services import PersonNotFoundError, PersonService

from ..responses import MessageResponse, PersonListResponse

router = APIRouter(tags=["People"])


def get_person_service() -> PersonService:
    """Get person service instance."""
    return Config.get_person_service()


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Person not found")


@router.get("/people", response_model=PersonListResponse)
async def list_people(
    limit: int = Query(20, ge=1, le=100, description="Page size"),
    offset: int = Query(0, ge=0, description="Offset (Number of items to skip)"),
    service: PersonService = Depends(get_person_service),
):
    """List people, oldest first."""
    people = await service.list_people(limit=limit, offset=offset)
    return PersonListResponse(
        results=people,
        page=CursorPage(hasMore=len(people) == limit, offset=offset, count=len(people)),
    )


@router.get("/people/{person_id}", response_model=Person)
async def get_person(
    person_id: int = Path(..., ge=1, le=MAX_INT32, description="Person ID"),
    service: PersonService = Depends(get_person_service),
):
    try:
        return await service.get_person(person_id)
    except PersonNotFoundError as e:
        raise _not_found() from e


@router.post("/people", response_model=Person, status_code=201)
async def create_person(
    payload: PersonPayload,
    service: PersonService = Depends(get_person_service),
):
    """Create a person; age, gender and nationality are looked up from the name."""
    return await service.create_person(payload)


@router.put("/people/{person_id}", response_model=Person)
async def update_person(
    payload: PersonPayload,
    person_id: int = Path(..., ge=1, le=MAX_INT32, description="Person ID"),
    service: PersonService = Depends(get_person_service),
):
    """Replace a person's names and look up the derived fields again."""
    try:
        return await service.update_person(person_id, payload)
    except PersonNotFoundError as e:
        raise _not_found() from e


@router.delete("/people/{person_id}", response_model=MessageResponse)
async def delete_person(
    person_id: int = Path(..., ge=1, le=MAX_INT32, description="Person ID"),
    service: PersonService = Depends(get_person_service),
):
    try:
        await service.delete_person(person_id)
    except PersonNotFoundError as e:
        raise _not_found() from e
    return MessageResponse(message="Person deleted successfully")
