"""
Error taxonomy shared by every store adapter.

Adapters raise these instead of driver exceptions so the HTTP layer can
pick a status from ``kind`` without knowing which backend is running.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    NOT_FOUND = "USER_NOT_FOUND"
    DUPLICATE = "DUPLICATE_USERNAME"
    UNAVAILABLE = "DB_ERROR"


class StoreError(Exception):
    """Base class for store failures: a kind plus its context (username or cause)."""

    kind: ErrorKind

    def __init__(self, context: str):
        super().__init__(context)
        self.context = context

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.context}"


class UserNotFoundError(StoreError):
    kind = ErrorKind.NOT_FOUND


class DuplicateUsernameError(StoreError):
    kind = ErrorKind.DUPLICATE


class StoreUnavailableError(StoreError):
    """Raised on connection/transport failures of the backing database."""

    kind = ErrorKind.UNAVAILABLE
