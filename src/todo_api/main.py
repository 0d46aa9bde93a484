from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .db import create_db_engine, init_schema
from .dependencies import AppState
from .errors import register_error_handlers
from .logging import configure_logging, get_logger
from .routers import todos as todos_router
from .schemas import StatusOut
from .settings import Settings, get_settings

openapi_tags = [
    {"name": "health", "description": "Service health and status endpoints."},
    {
        "name": "todos",
        "description": "Create and list todo lists, list their items and check items off.",
    },
]


# PUBLIC_INTERFACE
def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The connection pool is created when the application starts and disposed
    when it stops; nothing touches the store at import time.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level, log_json=settings.log_json)
        log = get_logger(v=__version__)
        engine = create_db_engine(settings)
        init_schema(engine)
        app.state.todo = AppState(engine=engine, log=log)
        log.info("Application started", database=engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(
        title="Todo Lists Backend",
        description="Backend API service for todo lists and their items.",
        version=__version__,
        openapi_tags=openapi_tags,
        lifespan=lifespan,
    )

    # Configure CORS based on settings (CORS_ALLOW_ORIGINS), with '*' fallback
    allow_all = (settings.cors_allow_origins == ["*"]) or (len(settings.cors_allow_origins) == 0)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # PUBLIC_INTERFACE
    @app.get("/", response_model=StatusOut, summary="Health Check", tags=["health"])
    def status() -> StatusOut:
        """
        Health check endpoint.

        Returns:
            {"status": "OK"} while the service is up.
        """
        return StatusOut(status="OK")

    app.include_router(todos_router.router)
    return app


app = create_app()
