"""User creation and lookup use cases."""

from __future__ import annotations

import logging

from users_api.domain import NewUser, User
from users_api.repositories.base import UserStore

logger = logging.getLogger(__name__)


class UserService:
    """Delegates to a single ``UserStore``; store errors propagate unchanged."""

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def create_user(self, new_user: NewUser) -> None:
        self.store.insert(new_user)
        logger.info("Created user %r", new_user.username)

    def get_user(self, username: str) -> User:
        logger.debug("Looking up user %r", username)
        return self.store.find_by_username(username)
