"""Runtime configuration helpers backed by environment variables."""

import os
from typing import List

DEFAULT_SERVER_PORT = 2022
DEFAULT_DATABASE_URL = "sqlite+pysqlite:///./dogs.db"

_DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def server_port() -> int:
    """Return the listening port from SERVER_PORT, defaulting to 2022."""
    raw = os.getenv("SERVER_PORT", "").strip()
    if not raw:
        return DEFAULT_SERVER_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ValueError(f"SERVER_PORT must be an integer, got {raw!r}")
    if port <= 0 or port > 65535:
        raise ValueError(f"SERVER_PORT out of range: {port}")
    return port


def database_url() -> str:
    return os.getenv("DATABASE_URL", "").strip() or DEFAULT_DATABASE_URL


def log_level_name() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def api_base_url() -> str:
    """Where the presentation layer reaches the API."""
    return os.getenv("API_BASE_URL", "").strip() or f"http://localhost:{server_port()}"


def cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "")
    if not raw.strip():
        return list(_DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
