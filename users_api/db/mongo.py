"""Client helpers for the document (MongoDB) backend."""
from __future__ import annotations

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database

USERS_COLLECTION = "users"
USERNAME_INDEX = "username_unique"


def create_mongo_client(url: str, timeout_ms: int = 5000) -> MongoClient:
    """Build a client; pymongo connects lazily, so this never blocks on the server."""
    return MongoClient(url, serverSelectionTimeoutMS=timeout_ms)


def ensure_username_index(database: Database) -> str:
    return database[USERS_COLLECTION].create_index(
        [("username", ASCENDING)], name=USERNAME_INDEX, unique=True
    )
