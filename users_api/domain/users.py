"""User records as seen by the service, independent of the backend."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NewUser:
    """A user submitted for creation; carries no identity yet."""

    username: str
    email: str


@dataclass(frozen=True)
class User:
    """
    A stored user.

    ``id`` is whatever the backend issued (hex ObjectId string for the
    document store, integer key for the relational store). It is only
    echoed back to clients, never parsed.
    """

    id: Any
    username: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username, "email": self.email}
