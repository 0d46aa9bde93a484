from __future__ import annotations

from typing import Annotated, List

import structlog
from fastapi import APIRouter, Depends, Path

from .. import repositories
from ..db import acquire_connection
from ..dependencies import AppState, get_app_state
from ..errors import AppError
from ..schemas import CheckResult, ErrorOut, TodoItemOut, TodoListCreate, TodoListOut

# Store ids are 32-bit integers; larger values never reach the store.
EntityId = Annotated[int, Path(ge=1, le=2**31 - 1)]

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={
        404: {"model": ErrorOut, "description": "Referenced entity not found"},
        500: {"model": ErrorOut, "description": "Store or connection pool failure"},
    },
)


def log_error(log: structlog.stdlib.BoundLogger, err: AppError) -> AppError:
    """
    Emit an error record for ``err`` and hand it back unchanged.
    """
    log.bind(cause=err.cause, error_type=err.error_type.value).error(err.resolve_message())
    return err


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TodoListOut],
    summary="List Todo Lists",
    description="Return the 10 most recently created todo lists, newest first.",
)
@router.get("/", response_model=List[TodoListOut], include_in_schema=False)
def get_todos(state: AppState = Depends(get_app_state)) -> List[TodoListOut]:
    log = state.log.bind(handler="get_todos")
    with acquire_connection(state.engine, log) as conn:
        try:
            todos = repositories.get_todos(conn)
        except AppError as err:
            raise log_error(log, err)
    return [TodoListOut(**t) for t in todos]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TodoListOut,
    summary="Create Todo List",
    description="Create a new todo list and return it with its assigned id.",
)
@router.post("/", response_model=TodoListOut, include_in_schema=False)
def create_todo(payload: TodoListCreate, state: AppState = Depends(get_app_state)) -> TodoListOut:
    log = state.log.bind(handler="create_todo")
    with acquire_connection(state.engine, log) as conn:
        try:
            created = repositories.create_todo(conn, payload.title)
        except AppError as err:
            raise log_error(log, err)
    return TodoListOut(**created)


# PUBLIC_INTERFACE
@router.get(
    "/{list_id}/items",
    response_model=List[TodoItemOut],
    summary="List Items",
    description="Return the items of a todo list in ascending id order. Unknown lists yield an empty array.",
)
@router.get("/{list_id}/items/", response_model=List[TodoItemOut], include_in_schema=False)
def get_items(list_id: EntityId, state: AppState = Depends(get_app_state)) -> List[TodoItemOut]:
    log = state.log.bind(handler="get_items")
    with acquire_connection(state.engine, log) as conn:
        try:
            items = repositories.get_items(conn, list_id)
        except AppError as err:
            raise log_error(log, err)
    return [TodoItemOut(**i) for i in items]


# PUBLIC_INTERFACE
@router.put(
    "/{list_id}/items/{item_id}",
    response_model=CheckResult,
    summary="Check Item",
    description=(
        "Mark an item as checked. 'success' is true only when this request "
        "performed the transition; unknown items, items of another list and "
        "already checked items all report false."
    ),
)
def check_item(list_id: EntityId, item_id: EntityId, state: AppState = Depends(get_app_state)) -> CheckResult:
    log = state.log.bind(handler="check_item")
    with acquire_connection(state.engine, log) as conn:
        try:
            updated = repositories.check_item(conn, list_id, item_id)
        except AppError as err:
            raise log_error(log, err)
    return CheckResult(success=updated)
