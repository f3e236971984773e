"""Relational store backed by SQLAlchemy."""
from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from users_api.db.models import UserRow
from users_api.db.session import make_sessionmaker, session_scope
from users_api.domain import (
    DuplicateUsernameError,
    NewUser,
    StoreUnavailableError,
    User,
    UserNotFoundError,
)
from .base import UserStore

logger = logging.getLogger(__name__)


def _cause(exc: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception; its own str() drags the SQL along.
    return str(getattr(exc, "orig", None) or exc)


class SQLUserStore(UserStore):
    """Users stored as rows of the ``users`` table (unique ``username`` column)."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self._sessions = make_sessionmaker(engine)

    def insert(self, new_user: NewUser) -> None:
        row = UserRow(username=new_user.username, email=new_user.email)
        try:
            with session_scope(self._sessions) as session:
                session.add(row)
                session.commit()
        except IntegrityError as exc:
            raise DuplicateUsernameError(new_user.username) from exc
        except SQLAlchemyError as exc:
            logger.warning("Insert of %r failed: %s", new_user.username, _cause(exc))
            raise StoreUnavailableError(_cause(exc)) from exc

    def find_by_username(self, username: str) -> User:
        try:
            with session_scope(self._sessions) as session:
                stmt = select(UserRow).where(UserRow.username == username).limit(1)
                row = session.execute(stmt).scalar_one_or_none()
                if row is None:
                    raise UserNotFoundError(username)
                return User(id=row.id, username=row.username, email=row.email)
        except SQLAlchemyError as exc:
            logger.warning("Lookup of %r failed: %s", username, _cause(exc))
            raise StoreUnavailableError(_cause(exc)) from exc

    def close(self) -> None:
        self.engine.dispose()
