"""Document store backed by MongoDB (pymongo)."""
from __future__ import annotations

import logging

from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from users_api.db.mongo import USERS_COLLECTION
from users_api.domain import (
    DuplicateUsernameError,
    NewUser,
    StoreUnavailableError,
    User,
    UserNotFoundError,
)
from .base import UserStore

logger = logging.getLogger(__name__)


class MongoUserStore(UserStore):
    """Users stored as ``{_id, username, email}`` documents in the ``users`` collection."""

    def __init__(self, database: Database) -> None:
        self.database = database
        self.collection = database[USERS_COLLECTION]

    def insert(self, new_user: NewUser) -> None:
        document = {"username": new_user.username, "email": new_user.email}
        try:
            self.collection.insert_one(document)
        except DuplicateKeyError as exc:
            raise DuplicateUsernameError(new_user.username) from exc
        except PyMongoError as exc:
            logger.warning("Insert of %r failed: %s", new_user.username, exc)
            raise StoreUnavailableError(str(exc)) from exc

    def find_by_username(self, username: str) -> User:
        try:
            document = self.collection.find_one({"username": username})
        except PyMongoError as exc:
            logger.warning("Lookup of %r failed: %s", username, exc)
            raise StoreUnavailableError(str(exc)) from exc
        if document is None:
            raise UserNotFoundError(username)
        missing = [field for field in ("_id", "username", "email") if field not in document]
        if missing:
            logger.warning("User document %r lacks %s", username, ", ".join(missing))
            raise StoreUnavailableError(f"user document {username!r} is missing {', '.join(missing)}")
        return User(id=str(document["_id"]), username=document["username"], email=document["email"])

    def close(self) -> None:
        self.database.client.close()
