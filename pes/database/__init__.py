"""Database package for Person Enrichment Service."""

from .person_database import PersonDatabase
from .sql_database import SQLPersonDatabase


def get_database(database_url: str) -> PersonDatabase:
    """Open the relational store at ``database_url`` and make sure its schema exists."""
    db = SQLPersonDatabase(database_url)
    db.create_schema()
    return db


__all__ = ["PersonDatabase", "SQLPersonDatabase", "get_database"]
