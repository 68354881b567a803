"""SQLAlchemy backend implementing IPersonRepository."""

from __future__ import annotations

import logging

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from iincheck.core.exceptions import PersonAlreadyExistsError, PersonNotFoundError, RepositoryError
from iincheck.models.person import Person

logger = logging.getLogger(__name__)

metadata = sa.MetaData()

people = sa.Table(
    "people",
    metadata,
    sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
    sa.Column("name", sa.String(255), nullable=False),
    sa.Column("iin", sa.String(12), nullable=False, unique=True),
    sa.Column("phone", sa.String(32), nullable=False, server_default=""),
)


def _escape_like(value: str, escape: str = "\\") -> str:
    return (
        value.replace(escape, escape * 2)
        .replace("%", f"{escape}%")
        .replace("_", f"{escape}_")
    )


def _to_person(row: sa.Row) -> Person:
    return Person(name=row.name, iin=row.iin, phone=row.phone)


class SQLPersonRepository:
    """Production IPersonRepository backed by a relational database."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @classmethod
    def from_url(cls, url: str, pool_size: int = 5) -> SQLPersonRepository:
        kwargs: dict = {"pool_pre_ping": True}
        if not url.startswith("sqlite"):
            kwargs["pool_size"] = pool_size
        return cls(sa.create_engine(url, **kwargs))

    def create_schema(self) -> None:
        try:
            metadata.create_all(self._engine, checkfirst=True)
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to create schema: {exc}") from exc

    def create(self, person: Person) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    people.insert().values(name=person.name, iin=person.iin, phone=person.phone)
                )
        except IntegrityError as exc:
            raise PersonAlreadyExistsError(person.iin) from exc
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to create person: {exc}") from exc

    def get_by_iin(self, iin: str) -> Person:
        query = sa.select(people.c.name, people.c.iin, people.c.phone).where(people.c.iin == iin)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query).first()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to get person by IIN: {exc}") from exc
        if row is None:
            raise PersonNotFoundError(iin)
        return _to_person(row)

    def find_by_name_part(self, name_part: str) -> list[Person]:
        pattern = f"%{_escape_like(name_part)}%"
        query = (
            sa.select(people.c.name, people.c.iin, people.c.phone)
            .where(people.c.name.ilike(pattern, escape="\\"))
            .order_by(people.c.name, people.c.iin)
        )
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(query).all()
        except SQLAlchemyError as exc:
            raise RepositoryError(f"failed to find people by name part: {exc}") from exc
        return [_to_person(row) for row in rows]

    def ping(self) -> bool:
        try:
            with self._engine.connect() as conn:
                conn.execute(sa.text("SELECT 1"))
        except SQLAlchemyError as exc:
            logger.warning("Database ping failed: %s", exc)
            return False
        return True

    def dispose(self) -> None:
        self._engine.dispose()
