"""
Data access for todo lists and items.

Each function runs against a connection the caller already borrowed from
the pool. Store failures are converted into ``AppError`` here, at the
statement boundary; nothing is retried.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import false, insert, select, true, update
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from .db import todo_item, todo_list
from .errors import AppError, AppErrorType
from .models import TodoItemEntity, TodoListEntity, todo_item_from_row, todo_list_from_row

RECENT_LISTS_LIMIT = 10


# PUBLIC_INTERFACE
def get_todos(conn: Connection) -> List[TodoListEntity]:
    """Return the most recently created lists, newest first."""
    stmt = (
        select(todo_list.c.id, todo_list.c.title)
        .order_by(todo_list.c.id.desc())
        .limit(RECENT_LISTS_LIMIT)
    )
    try:
        rows = conn.execute(stmt).fetchall()
    except SQLAlchemyError as err:
        raise AppError.from_db_error(err) from err
    return [todo_list_from_row(r) for r in rows]


# PUBLIC_INTERFACE
def get_items(conn: Connection, list_id: int) -> List[TodoItemEntity]:
    """
    Return every item of ``list_id`` in ascending id order.

    An unknown list yields an empty list, not an error.
    """
    stmt = (
        select(todo_item.c.id, todo_item.c.list_id, todo_item.c.title, todo_item.c.checked)
        .where(todo_item.c.list_id == list_id)
        .order_by(todo_item.c.id.asc())
    )
    try:
        rows = conn.execute(stmt).fetchall()
    except SQLAlchemyError as err:
        raise AppError.from_db_error(err) from err
    return [todo_item_from_row(r) for r in rows]


# PUBLIC_INTERFACE
def create_todo(conn: Connection, title: str) -> TodoListEntity:
    """Insert a new list and return it with its store-assigned id."""
    stmt = insert(todo_list).values(title=title).returning(todo_list.c.id, todo_list.c.title)
    try:
        row = conn.execute(stmt).first()
        conn.commit()
    except SQLAlchemyError as err:
        raise AppError.from_db_error(err) from err

    if row is None:
        raise AppError(
            AppErrorType.DB_ERROR,
            message="Error creating todo list",
            cause="unknown error",
        )
    return todo_list_from_row(row)


# PUBLIC_INTERFACE
def check_item(conn: Connection, list_id: int, item_id: int) -> bool:
    """
    Mark an unchecked item of ``list_id`` as checked.

    Returns True only when this call performed the transition. A missing
    item, an item of another list and an already checked item all give
    False. The ``checked = false`` guard makes the update single-fire: when
    several requests race on one item the store lets exactly one match.
    """
    stmt = (
        update(todo_item)
        .where(
            todo_item.c.list_id == list_id,
            todo_item.c.id == item_id,
            todo_item.c.checked == false(),
        )
        .values(checked=true())
    )
    try:
        result = conn.execute(stmt)
        conn.commit()
    except SQLAlchemyError as err:
        raise AppError.from_db_error(err) from err
    return result.rowcount == 1
