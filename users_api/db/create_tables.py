"""
Prepare storage for the configured backend before the service starts.

    python -m users_api.db.create_tables

The service itself never runs this: the relational table and the document
unique index must exist before the first request.
"""
from __future__ import annotations

from pymongo.errors import PyMongoError
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from users_api.core.config import DOCUMENT_BACKEND, RELATIONAL_BACKEND, Settings, get_settings
from .mongo import create_mongo_client, ensure_username_index
from .session import Base, create_db_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_relational_schema(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)


def create_all(settings: Settings) -> str:
    """Create the schema for ``settings.storage_backend``; returns a summary line."""
    if settings.storage_backend == RELATIONAL_BACKEND:
        engine = create_db_engine(settings.database_url)
        try:
            create_relational_schema(engine)
        finally:
            engine.dispose()
        return "Relational users table created successfully."
    if settings.storage_backend == DOCUMENT_BACKEND:
        client = create_mongo_client(settings.mongo_url, settings.mongo_timeout_ms)
        try:
            ensure_username_index(client[settings.mongo_database])
        finally:
            client.close()
        return "Document username index created successfully."
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.storage_backend!r}")


if __name__ == "__main__":
    try:
        print(create_all(get_settings()))
    except (SQLAlchemyError, PyMongoError, ValueError) as exc:
        raise SystemExit(f"Failed to create schema: {exc}") from exc
