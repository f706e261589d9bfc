"""Task rows kept in a relational database."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterator

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    create_engine,
    delete,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from taskboard.config import Config
from taskboard.status import TaskStatus

POOL_SIZE = 8

metadata = MetaData()

to_do = Table(
    "to_do",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String, nullable=False),
    Column("status", String, nullable=False),
    Column("date", DateTime, nullable=False),
)


@dataclass(frozen=True)
class Item:
    """One stored task row."""

    id: int
    title: str
    status: str
    date: datetime


class DatabaseUnavailable(Exception):
    """Raised when no connection to the database can be made."""


def new_item(title: str) -> dict[str, Any]:
    """Return the column values of a freshly created, pending task."""
    return {
        "title": title,
        "status": TaskStatus.PENDING.stringify(),
        "date": datetime.now(),
    }


class Database:
    """Access to the task table through a pooled engine."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @classmethod
    def from_config(cls, config: Config) -> Database:
        """Build from the DB_URL setting; raise ValueError if it is missing."""
        url = config.map.get("DB_URL")
        if not isinstance(url, str):
            raise ValueError("DB_URL must be set to a database URL")
        options: dict[str, Any] = {}
        if make_url(url).get_backend_name() != "sqlite":
            options["pool_size"] = POOL_SIZE
        return cls(create_engine(url, **options))

    @contextmanager
    def connection(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction that commits on success."""
        try:
            conn = self.engine.connect()
        except SQLAlchemyError as error:
            raise DatabaseUnavailable("could not make connection to database") from error
        with conn, conn.begin():
            yield conn

    def load_items(self) -> list[Item]:
        """Return every task in order of creation."""
        with self.connection() as conn:
            rows = conn.execute(select(to_do).order_by(to_do.c.id.asc())).all()
        return [Item(**dict(row._mapping)) for row in rows]

    def create(self, title: str) -> bool:
        """Add a pending task unless one with the title exists; report whether added."""
        with self.connection() as conn:
            existing = conn.execute(
                select(to_do.c.id).where(to_do.c.title == title).limit(1)
            ).first()
            if existing is not None:
                return False
            conn.execute(insert(to_do).values(**new_item(title)))
        return True

    def mark_done(self, title: str) -> int:
        """Set every task with the title to done; return how many rows changed."""
        with self.connection() as conn:
            result = conn.execute(
                update(to_do)
                .where(to_do.c.title == title)
                .values(status=TaskStatus.DONE.stringify())
            )
        return result.rowcount

    def delete(self, title: str) -> None:
        """Remove the oldest task with the title; raise KeyError if there is none."""
        with self.connection() as conn:
            row = conn.execute(
                select(to_do.c.id)
                .where(to_do.c.title == title)
                .order_by(to_do.c.id.asc())
                .limit(1)
            ).first()
            if row is None:
                raise KeyError(title)
            conn.execute(delete(to_do).where(to_do.c.id == row.id))