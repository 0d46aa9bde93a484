from __future__ import annotations

from dataclasses import dataclass

import structlog
from fastapi import Request
from sqlalchemy.engine import Engine


@dataclass(frozen=True)
class AppState:
    """
    Collaborators shared by every request: the connection pool and the base
    logger. Built once by the application lifespan.
    """

    engine: Engine
    log: structlog.stdlib.BoundLogger


# PUBLIC_INTERFACE
def get_app_state(request: Request) -> AppState:
    """Return the AppState the lifespan stored on the application."""
    return request.app.state.todo
