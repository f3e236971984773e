"""Database helpers (engine/session and Mongo client export)."""

from .mongo import USERS_COLLECTION, create_mongo_client
from .session import Base, create_db_engine, make_sessionmaker, session_scope

__all__ = [
    "Base",
    "USERS_COLLECTION",
    "create_db_engine",
    "create_mongo_client",
    "make_sessionmaker",
    "session_scope",
]
