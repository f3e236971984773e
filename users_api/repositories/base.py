"""The storage contract every backend adapter implements."""
from __future__ import annotations

from abc import ABC, abstractmethod

from users_api.domain import NewUser, User


class UserStore(ABC):
    """
    Insert and look up users.

    Implementations translate their driver's failures into
    ``users_api.domain.errors``: ``DuplicateUsernameError`` when the
    username is taken, ``UserNotFoundError`` on an empty lookup and
    ``StoreUnavailableError`` for anything the database itself reports.
    """

    @abstractmethod
    def insert(self, new_user: NewUser) -> None:
        """Persist ``new_user`` with a backend-assigned identity."""

    @abstractmethod
    def find_by_username(self, username: str) -> User:
        """Return the user whose username equals ``username`` exactly."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying connection pool."""
