"""Domain types shared by adapters, services and routers."""

from .errors import (
    DuplicateUsernameError,
    ErrorKind,
    StoreError,
    StoreUnavailableError,
    UserNotFoundError,
)
from .users import NewUser, User

__all__ = [
    "DuplicateUsernameError",
    "ErrorKind",
    "NewUser",
    "StoreError",
    "StoreUnavailableError",
    "User",
    "UserNotFoundError",
]
