from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - DATABASE_URL: SQLAlchemy URL of the store. Default 'sqlite:///./data/todos.db'
    - DB_POOL_SIZE: number of pooled connections kept open (default: 5)
    - DB_MAX_OVERFLOW: extra connections allowed beyond the pool size (default: 0)
    - DB_POOL_TIMEOUT: seconds to wait for a free connection (default: 30)
    - SERVER_HOST / SERVER_PORT: bind address for the HTTP server
    - LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - LOG_JSON: 'true' to emit JSON lines instead of console output
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    """

    database_url: str
    pool_size: int
    max_overflow: int
    pool_timeout: int
    server_host: str
    server_port: int
    log_level: str
    log_json: bool
    cors_allow_origins: List[str]


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_bool(value: str, default: bool = False) -> bool:
    v = value.strip().lower()
    if v in {"1", "true", "yes", "on"}:
        return True
    if v in {"0", "false", "no", "off"}:
        return False
    return default


def _parse_int(value: str, default: int, minimum: int = 0) -> int:
    try:
        parsed = int(value.strip())
    except ValueError:
        return default
    return parsed if parsed >= minimum else default


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    log_level = _get_env("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        log_level = "INFO"

    return Settings(
        database_url=_get_env("DATABASE_URL", "sqlite:///./data/todos.db").strip(),
        pool_size=_parse_int(_get_env("DB_POOL_SIZE", "5"), 5, minimum=1),
        max_overflow=_parse_int(_get_env("DB_MAX_OVERFLOW", "0"), 0),
        pool_timeout=_parse_int(_get_env("DB_POOL_TIMEOUT", "30"), 30),
        server_host=_get_env("SERVER_HOST", "127.0.0.1").strip(),
        server_port=_parse_int(_get_env("SERVER_PORT", "8080"), 8080, minimum=1),
        log_level=log_level,
        log_json=_parse_bool(_get_env("LOG_JSON", "false"), False),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
    )
