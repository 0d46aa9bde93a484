"""
Error taxonomy for the todo API.

Every failure that reaches a client is an ``AppError``. Store and pool
failures are converted at the boundary where they occur; the diagnostic
``cause`` is logged but never rendered, only the resolved message is.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

NOT_FOUND_MESSAGE = "The request item was not found"
DEFAULT_MESSAGE = "An unexpected error has occurred"


class AppErrorType(str, Enum):
    DB_ERROR = "DBError"
    # Not raised by the current operations.
    NOT_FOUND_ERROR = "NotFoundError"


_STATUS_CODES = {
    AppErrorType.DB_ERROR: 500,
    AppErrorType.NOT_FOUND_ERROR: 404,
}


# PUBLIC_INTERFACE
class AppError(Exception):
    """
    A classified failure carrying a user-facing message and a diagnostic cause.

    Fields:
    - message: optional explicit message shown to the caller
    - cause: optional diagnostic detail, logged only
    - error_type: the failure kind, which selects the status code
    """

    def __init__(
        self,
        error_type: AppErrorType,
        message: Optional[str] = None,
        cause: Optional[str] = None,
    ) -> None:
        super().__init__(message or error_type.value)
        self.error_type = error_type
        self.message = message
        self.cause = cause

    @classmethod
    def from_db_error(cls, exc: SQLAlchemyError) -> "AppError":
        """Convert a pool or store failure into a ``DBError`` with no explicit message."""
        return cls(AppErrorType.DB_ERROR, message=None, cause=str(exc))

    def resolve_message(self) -> str:
        """Return the message shown to the caller."""
        if self.message is not None:
            return self.message
        if self.error_type is AppErrorType.NOT_FOUND_ERROR:
            return NOT_FOUND_MESSAGE
        return DEFAULT_MESSAGE

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self.error_type]

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content={"error": self.resolve_message()})

    def __repr__(self) -> str:
        return (
            f"AppError(error_type={self.error_type.value!r}, "
            f"message={self.message!r}, cause={self.cause!r})"
        )


def register_error_handlers(app: FastAPI) -> None:
    """Register the ``AppError`` and request validation handlers on ``app``."""

    @app.exception_handler(AppError)
    async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
        return exc.to_response()

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """
        Return a consistent JSON structure for request validation errors.

        Response format:
            {
                "error": "ValidationError",
                "detail": [... pydantic/fastapi error details ...],
                "message": "Request validation failed"
            }
        """
        return JSONResponse(
            status_code=422,
            content={
                "error": "ValidationError",
                "message": "Request validation failed",
                "detail": jsonable_encoder(exc.errors()),
            },
        )
