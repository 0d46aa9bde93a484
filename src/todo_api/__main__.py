"""
Run the API server.

Usage:
    python -m todo_api

Bind address and store are taken from the environment (see ``settings``).
"""
from __future__ import annotations

import uvicorn

from .logging import configure_logging, get_logger
from .main import create_app
from .settings import get_settings


def main() -> None:
    settings = get_settings()
    configure_logging(settings.log_level, log_json=settings.log_json)
    get_logger().info("Starting server", host=settings.server_host, port=settings.server_port)
    uvicorn.run(
        create_app(settings),
        host=settings.server_host,
        port=settings.server_port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
