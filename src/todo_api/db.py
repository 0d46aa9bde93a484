"""
Store wiring: table definitions, the pooled engine and scoped connections.

SQLAlchemy Core (not ORM) is used: every request borrows one pooled
connection, runs a single statement through it and hands it back.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    MetaData,
    Table,
    Text,
    create_engine,
    event,
    false,
)
from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from .errors import AppError
from .settings import Settings

metadata = MetaData()

todo_list = Table(
    "todo_list",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", Text, nullable=False),
)

todo_item = Table(
    "todo_item",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("list_id", Integer, ForeignKey("todo_list.id"), nullable=False, index=True),
    Column("title", Text, nullable=False),
    Column("checked", Boolean, nullable=False, default=False, server_default=false()),
)


def _is_memory_sqlite(database: str | None) -> bool:
    return database in (None, "", ":memory:")


# PUBLIC_INTERFACE
def create_db_engine(settings: Settings) -> Engine:
    """
    Create the pooled engine for ``settings.database_url``.

    SQLite file databases get their parent directory created and foreign keys
    switched on for every pooled connection. An in-memory SQLite database is
    shared through a single static connection.
    """
    url = make_url(settings.database_url)
    is_sqlite = url.get_backend_name() == "sqlite"

    if is_sqlite and _is_memory_sqlite(url.database):
        engine = create_engine(
            url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    else:
        if is_sqlite:
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
        engine = create_engine(
            url,
            pool_size=settings.pool_size,
            max_overflow=settings.max_overflow,
            pool_timeout=settings.pool_timeout,
            pool_pre_ping=True,
        )

    if is_sqlite:

        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_schema(engine: Engine) -> None:
    """Create the tables if they do not exist yet. Idempotent."""
    metadata.create_all(engine)


# PUBLIC_INTERFACE
@contextmanager
def acquire_connection(engine: Engine, log: structlog.stdlib.BoundLogger) -> Iterator[Connection]:
    """
    Borrow a connection from the pool for the duration of the ``with`` block.

    A failure to obtain one (pool exhausted, store unreachable) is logged as
    critical and raised as a ``DBError``. The connection is returned to the
    pool on every exit path.
    """
    try:
        conn = engine.connect()
    except SQLAlchemyError as err:
        log.bind(cause=str(err)).critical("Error acquiring database connection")
        raise AppError.from_db_error(err) from err
    try:
        yield conn
    finally:
        conn.close()
