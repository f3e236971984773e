"""
Configuration helpers for the users backend.

Settings are read from environment variables once and cached, so that
routers/services/adapters do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os

DOCUMENT_BACKEND = "document"
RELATIONAL_BACKEND = "relational"
BACKENDS = (DOCUMENT_BACKEND, RELATIONAL_BACKEND)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    log_level: str
    log_file: str | None
    storage_backend: str
    database_url: str
    mongo_url: str
    mongo_database: str
    mongo_timeout_ms: int


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=(os.getenv("LOG_FILE") or "").strip() or None,
        storage_backend=(os.getenv("STORAGE_BACKEND") or RELATIONAL_BACKEND).strip().lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite:///./users.db"),
        mongo_url=os.getenv("MONGO_URL", "mongodb://localhost:27017"),
        mongo_database=os.getenv("MONGO_DATABASE", "otus"),
        mongo_timeout_ms=_int(os.getenv("MONGO_TIMEOUT_MS", "5000"), 5000),
    )
