"""SQLAlchemy implementation of PersonDatabase."""

import asyncio
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import DateTime, Integer, String, Text, create_engine, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, sessionmaker

from pes.core.constraints import MAX_NAME_LENGTH
from pes.core.models import Enrichment, Person, PersonPayload

from .person_database import PersonDatabase

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class PersonRow(Base):
    __tablename__ = "people"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, default="")
    surname: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, default="")
    patronymic: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, default="")
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    gender: Mapped[str] = mapped_column(Text, nullable=False, default="")
    nationality: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    # Soft delete: rows with deleted_at set are invisible to every query
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    def apply(self, payload: PersonPayload, enrichment: Enrichment) -> None:
        self.name = payload.name
        self.surname = payload.surname
        self.patronymic = payload.patronymic
        self.age = enrichment.age
        self.gender = enrichment.gender
        self.nationality = enrichment.nationality

    def to_model(self) -> Person:
        return Person(
            id=self.id,
            name=self.name,
            surname=self.surname,
            patronymic=self.patronymic,
            age=self.age,
            gender=self.gender,
            nationality=self.nationality,
            createdAt=self.created_at,
            updatedAt=self.updated_at,
        )


def make_engine(database_url: str) -> Engine:
    connect_args = {}
    if database_url.startswith("sqlite"):
        # Sessions are used from worker threads
        connect_args["check_same_thread"] = False
    return create_engine(database_url, connect_args=connect_args)


class SQLPersonDatabase(PersonDatabase):
    """Relational person store.

    The engine is shared by the whole process; every call opens its own
    session and runs in a worker thread so the event loop is not blocked.
    """

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None:
            if database_url is None:
                raise ValueError("Either database_url or engine is required")
            engine = make_engine(database_url)
        self.engine = engine
        self._sessions = sessionmaker(bind=engine, expire_on_commit=False)

    def create_schema(self) -> None:
        """Create the people table if it does not exist."""
        logger.info("Ensuring schema on %s", self.engine.url.render_as_string())
        Base.metadata.create_all(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    def _live(self, session, person_id: int) -> Optional[PersonRow]:
        return session.scalar(
            select(PersonRow).where(
                PersonRow.id == person_id, PersonRow.deleted_at.is_(None)
            )
        )

    def _create(self, payload: PersonPayload, enrichment: Enrichment) -> Person:
        with self._sessions.begin() as session:
            row = PersonRow()
            row.apply(payload, enrichment)
            session.add(row)
            session.flush()
            return row.to_model()

    def _update(
        self, person_id: int, payload: PersonPayload, enrichment: Enrichment
    ) -> Optional[Person]:
        with self._sessions.begin() as session:
            row = self._live(session, person_id)
            if row is None:
                return None
            row.apply(payload, enrichment)
            row.updated_at = _utcnow()
            session.flush()
            return row.to_model()

    def _get(self, person_id: int) -> Optional[Person]:
        with self._sessions() as session:
            row = self._live(session, person_id)
            return row.to_model() if row is not None else None

    def _delete(self, person_id: int) -> bool:
        with self._sessions.begin() as session:
            row = self._live(session, person_id)
            if row is None:
                return False
            row.deleted_at = _utcnow()
            return True

    def _list(self, limit: int, offset: int) -> List[Person]:
        with self._sessions() as session:
            rows = session.scalars(
                select(PersonRow)
                .where(PersonRow.deleted_at.is_(None))
                .order_by(PersonRow.id)
                .limit(limit)
                .offset(offset)
            )
            return [row.to_model() for row in rows]

    def _count(self) -> int:
        with self._sessions() as session:
            return session.scalar(
                select(func.count())
                .select_from(PersonRow)
                .where(PersonRow.deleted_at.is_(None))
            )

    async def create_person(
        self, payload: PersonPayload, enrichment: Enrichment
    ) -> Person:
        return await asyncio.to_thread(self._create, payload, enrichment)

    async def update_person(
        self, person_id: int, payload: PersonPayload, enrichment: Enrichment
    ) -> Optional[Person]:
        return await asyncio.to_thread(self._update, person_id, payload, enrichment)

    async def get_person(self, person_id: int) -> Optional[Person]:
        return await asyncio.to_thread(self._get, person_id)

    async def delete_person(self, person_id: int) -> bool:
        return await asyncio.to_thread(self._delete, person_id)

    async def list_people(self, limit: int = 100, offset: int = 0) -> List[Person]:
        return await asyncio.to_thread(self._list, limit, offset)

    async def count_people(self) -> int:
        return await asyncio.to_thread(self._count)
