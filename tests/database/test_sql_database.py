"""Unit tests for SQLPersonDatabase."""

import pytest

from pes.core.models import Enrichment, PersonPayload
from pes.database import PersonDatabase, SQLPersonDatabase, get_database


@pytest.fixture
def payload():
    return PersonPayload(name="John", surname="Doe", patronymic="Jr")


@pytest.fixture
def enrichment():
    return Enrichment(age=42, gender="male", nationality="US")


def test_is_person_database(temp_db):
    assert isinstance(temp_db, PersonDatabase)


def test_requires_url_or_engine():
    with pytest.raises(ValueError):
        SQLPersonDatabase()


@pytest.mark.asyncio
async def test_create_assigns_id(temp_db, payload, enrichment):
    first = await temp_db.create_person(payload, enrichment)
    second = await temp_db.create_person(payload, enrichment)

    assert first.id is not None
    assert second.id != first.id
    assert first.name == "John"
    assert first.surname == "Doe"
    assert first.patronymic == "Jr"
    assert (first.age, first.gender, first.nationality) == (42, "male", "US")
    assert first.createdAt is not None


@pytest.mark.asyncio
async def test_get_round_trip(temp_db, payload, enrichment):
    created = await temp_db.create_person(payload, enrichment)
    fetched = await temp_db.get_person(created.id)

    assert fetched is not None
    assert fetched.model_dump(exclude={"createdAt", "updatedAt"}) == created.model_dump(
        exclude={"createdAt", "updatedAt"}
    )


@pytest.mark.asyncio
async def test_get_nonexistent_person(temp_db):
    assert await temp_db.get_person(12345) is None


@pytest.mark.asyncio
async def test_update_replaces_all_fields(temp_db, payload, enrichment):
    created = await temp_db.create_person(payload, enrichment)

    updated = await temp_db.update_person(
        created.id,
        PersonPayload(name="Anna"),
        Enrichment(age=31, gender="female", nationality="RU"),
    )

    assert updated.id == created.id
    assert updated.name == "Anna"
    assert updated.surname == ""
    assert updated.patronymic == ""
    assert (updated.age, updated.gender, updated.nationality) == (31, "female", "RU")
    fetched = await temp_db.get_person(created.id)
    assert fetched.name == "Anna"
    assert fetched.nationality == "RU"


@pytest.mark.asyncio
async def test_update_nonexistent_person(temp_db, payload, enrichment):
    assert await temp_db.update_person(999, payload, enrichment) is None
    assert await temp_db.count_people() == 0


@pytest.mark.asyncio
async def test_delete_hides_person(temp_db, payload, enrichment):
    created = await temp_db.create_person(payload, enrichment)

    assert await temp_db.delete_person(created.id) is True
    assert await temp_db.get_person(created.id) is None
    assert await temp_db.list_people() == []
    assert await temp_db.count_people() == 0
    # A deleted person cannot be updated or deleted again
    assert await temp_db.update_person(created.id, payload, enrichment) is None
    assert await temp_db.delete_person(created.id) is False


@pytest.mark.asyncio
async def test_delete_nonexistent_leaves_store_unchanged(temp_db, payload, enrichment):
    await temp_db.create_person(payload, enrichment)

    assert await temp_db.delete_person(999) is False
    assert await temp_db.count_people() == 1


@pytest.mark.asyncio
async def test_list_pagination(temp_db, enrichment):
    for name in ["A", "B", "C", "D", "E"]:
        await temp_db.create_person(PersonPayload(name=name), enrichment)

    page = await temp_db.list_people(limit=2, offset=1)
    assert [p.name for p in page] == ["B", "C"]
    assert len(await temp_db.list_people()) == 5
    assert await temp_db.count_people() == 5


@pytest.mark.asyncio
async def test_get_database_creates_schema(tmp_path, payload, enrichment):
    db = get_database(f"sqlite:///{tmp_path / 'fresh.db'}")
    try:
        created = await db.create_person(payload, enrichment)
        assert created.id is not None
    finally:
        db.dispose()
