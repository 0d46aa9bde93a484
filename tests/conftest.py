"""Shared pytest fixtures and helpers for the todo API tests."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Iterator

import pytest
import structlog
from fastapi.testclient import TestClient
from sqlalchemy import insert
from sqlalchemy.engine import Engine

from todo_api.db import create_db_engine, init_schema, todo_item, todo_list
from todo_api.main import create_app
from todo_api.settings import Settings, get_settings


def make_settings(tmp_path: Path, **overrides: Any) -> Settings:
    """Settings pointing at a fresh SQLite file under ``tmp_path``."""
    values: dict[str, Any] = {
        "database_url": f"sqlite:///{tmp_path / 'todos.db'}",
        "pool_size": 10,
        "max_overflow": 0,
        "pool_timeout": 5,
        "log_level": "INFO",
        "log_json": False,
    }
    values.update(overrides)
    return dataclasses.replace(get_settings(), **values)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def db_engine(settings: Settings) -> Iterator[Engine]:
    """Initialized SQLite engine with both tables created."""
    engine = create_db_engine(settings)
    init_schema(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def log() -> structlog.stdlib.BoundLogger:
    return structlog.get_logger("todo_api").bind(handler="test")


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """TestClient with the application lifespan running."""
    with TestClient(create_app(settings)) as c:
        yield c


def app_engine(client: TestClient) -> Engine:
    return client.app.state.todo.engine


def add_list(engine: Engine, title: str) -> int:
    with engine.begin() as conn:
        return conn.execute(insert(todo_list).values(title=title).returning(todo_list.c.id)).scalar_one()


def add_item(engine: Engine, list_id: int, title: str, checked: bool = False) -> int:
    with engine.begin() as conn:
        return conn.execute(
            insert(todo_item)
            .values(list_id=list_id, title=title, checked=checked)
            .returning(todo_item.c.id)
        ).scalar_one()
