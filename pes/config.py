"""Configuration for Person Enrichment Service."""

import os
from typing import ClassVar, Dict, Literal, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from pes.database import PersonDatabase, get_database
from pes.enrichment import Enricher
from pes.services import PersonService


class ConfigurationError(RuntimeError):
    """Required configuration is missing or invalid."""


class Settings(BaseModel):
    """Process-wide settings, read once from the environment."""

    model_config = {"extra": "forbid", "frozen": True}

    database_url: str = Field(..., min_length=1)
    agify_api: str = Field(..., min_length=1)
    genderize_api: str = Field(..., min_length=1)
    nationalize_api: str = Field(..., min_length=1)
    lookup_timeout_seconds: float = Field(10.0, gt=0)
    enrichment_mode: Literal["sequential", "parallel"] = "sequential"
    port: int = Field(8080, ge=1, le=65535)
    log_level: str = "INFO"

    REQUIRED: ClassVar[Dict[str, str]] = {
        "DATABASE_URL": "database_url",
        "AGIFY_API": "agify_api",
        "GENDERIZE_API": "genderize_api",
        "NATIONALIZE_API": "nationalize_api",
    }
    OPTIONAL: ClassVar[Dict[str, str]] = {
        "LOOKUP_TIMEOUT_SECONDS": "lookup_timeout_seconds",
        "ENRICHMENT_MODE": "enrichment_mode",
        "PORT": "port",
        "LOG_LEVEL": "log_level",
    }

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (the process environment by default).

        A ``.env`` file in the working directory is loaded first when reading
        the process environment; variables already set take precedence.

        Raises:
            ConfigurationError: If a required variable is unset or a value is invalid
        """
        if environ is None:
            load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        missing = [key for key in cls.REQUIRED if not environ.get(key)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        values = {field: environ[key] for key, field in cls.REQUIRED.items()}
        values.update(
            {field: environ[key] for key, field in cls.OPTIONAL.items() if environ.get(key)}
        )
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


class Config:
    """Holds the objects built from settings, shared by every request."""

    _settings: Optional[Settings] = None
    _database: Optional[PersonDatabase] = None
    _person_service: Optional[PersonService] = None

    @classmethod
    def get_settings(cls) -> Settings:
        if cls._settings is None:
            cls._settings = Settings.from_env()
        return cls._settings

    @classmethod
    def get_database(cls) -> PersonDatabase:
        if cls._database is None:
            cls._database = get_database(cls.get_settings().database_url)
        return cls._database

    @classmethod
    def get_person_service(cls) -> PersonService:
        if cls._person_service is None:
            cls._person_service = PersonService(
                database=cls.get_database(),
                enricher=Enricher.from_settings(cls.get_settings()),
            )
        return cls._person_service

    @classmethod
    def reset(cls) -> None:
        cls._settings = None
        cls._database = None
        cls._person_service = None
