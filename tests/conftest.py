"""Pytest configuration and shared fixtures."""

import pytest

from pes.database import SQLPersonDatabase
from pes.enrichment import Enricher
from pes.services import PersonService
from tests.fakes import FakeLookupClient


@pytest.fixture
def temp_db(tmp_path):
    """Create a temporary SQLite person database for testing."""
    db = SQLPersonDatabase(f"sqlite:///{tmp_path / 'people.db'}")
    db.create_schema()
    yield db
    db.dispose()


@pytest.fixture
def age_client():
    return FakeLookupClient(
        "agify",
        {"John": {"count": 1, "name": "John", "age": 42}, "Anna": {"age": 31.9}},
        default={"age": None},
    )


@pytest.fixture
def gender_client():
    return FakeLookupClient(
        "genderize",
        {"John": {"name": "John", "gender": "male"}, "Anna": {"gender": "female"}},
        default={"gender": None},
    )


@pytest.fixture
def nationality_client():
    return FakeLookupClient(
        "nationalize",
        {
            "John": {"country": [{"country_id": "US", "probability": 0.08}]},
            "Anna": {"country": [{"country_id": "RU"}, {"country_id": "UA"}]},
        },
        default={"country": []},
    )


@pytest.fixture
def enricher(age_client, gender_client, nationality_client):
    return Enricher(age_client, gender_client, nationality_client)


@pytest.fixture
def person_service(temp_db, enricher):
    return PersonService(database=temp_db, enricher=enricher)
