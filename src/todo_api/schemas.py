from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


# PUBLIC_INTERFACE
class TodoListCreate(BaseModel):
    """
    Schema for creating a new todo list.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"title": "Groceries"}})

    title: str = Field(..., description="Title of the todo list", min_length=1)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """
        Reject blank titles. The title is kept exactly as submitted.
        """
        if not v.strip():
            raise ValueError("title must not be blank")
        return v


# PUBLIC_INTERFACE
class TodoListOut(BaseModel):
    """
    Schema returned by the API for a todo list.
    """

    model_config = ConfigDict(json_schema_extra={"example": {"id": 1, "title": "Groceries"}})

    id: int = Field(..., description="Unique identifier of the todo list")
    title: str = Field(..., description="Title of the todo list")


# PUBLIC_INTERFACE
class TodoItemOut(BaseModel):
    """
    Schema returned by the API for an item of a todo list.
    """

    model_config = ConfigDict(
        json_schema_extra={"example": {"id": 5, "list_id": 1, "title": "Milk", "checked": False}}
    )

    id: int = Field(..., description="Unique identifier of the item")
    list_id: int = Field(..., description="Identifier of the list the item belongs to")
    title: str = Field(..., description="Title of the item")
    checked: bool = Field(default=False, description="Whether the item has been checked")


class StatusOut(BaseModel):
    status: str = Field(..., description="Service status, 'OK' when healthy")


class CheckResult(BaseModel):
    success: bool = Field(..., description="True when this request checked the item")


class ErrorOut(BaseModel):
    error: str = Field(..., description="User-facing error message")
