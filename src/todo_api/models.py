from __future__ import annotations

from typing import Any, TypedDict


# PUBLIC_INTERFACE
class TodoListEntity(TypedDict):
    """
    A todo list as stored in the ``todo_list`` table.

    Fields:
    - id: Store-assigned integer identifier
    - title: Non-empty title, stored exactly as submitted
    """

    id: int
    title: str


# PUBLIC_INTERFACE
class TodoItemEntity(TypedDict):
    """
    An item of a todo list as stored in the ``todo_item`` table.

    Fields:
    - id: Store-assigned integer identifier
    - list_id: Identifier of the owning TodoList
    - title: Item title
    - checked: Completion flag; only ever moves from False to True
    """

    id: int
    list_id: int
    title: str
    checked: bool


def todo_list_from_row(row: Any) -> TodoListEntity:
    """Map a result row with ``id`` and ``title`` columns to a TodoListEntity."""
    m = row._mapping
    return {"id": int(m["id"]), "title": str(m["title"])}


def todo_item_from_row(row: Any) -> TodoItemEntity:
    m = row._mapping
    return {
        "id": int(m["id"]),
        "list_id": int(m["list_id"]),
        "title": str(m["title"]),
        # SQLite hands booleans back as 0/1
        "checked": bool(m["checked"]),
    }
