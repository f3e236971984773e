from __future__ import annotations

import pytest

from users_api.domain import (
    DuplicateUsernameError,
    NewUser,
    StoreUnavailableError,
    User,
    UserNotFoundError,
)
from users_api.repositories.base import UserStore
from users_api.services.user_service import UserService


class RecordingStore(UserStore):
    def __init__(self, error=None):
        self.error = error
        self.inserted = []
        self.closed = False

    def insert(self, new_user):
        if self.error:
            raise self.error
        self.inserted.append(new_user)

    def find_by_username(self, username):
        if self.error:
            raise self.error
        return User(id=7, username=username, email="a@x.com")

    def close(self):
        self.closed = True


def test_create_user_delegates_to_store():
    store = RecordingStore()
    UserService(store).create_user(NewUser(username="alice", email="a@x.com"))
    assert store.inserted == [NewUser(username="alice", email="a@x.com")]


@pytest.mark.parametrize(
    "error",
    [
        DuplicateUsernameError("alice"),
        UserNotFoundError("alice"),
        StoreUnavailableError("connection refused"),
    ],
)
def test_store_errors_pass_through_unchanged(error):
    svc = UserService(RecordingStore(error=error))
    with pytest.raises(type(error)) as info:
        svc.create_user(NewUser(username="alice", email="a@x.com"))
    assert info.value is error
    with pytest.raises(type(error)) as info:
        svc.get_user("alice")
    assert info.value is error


def test_round_trip_on_each_backend(backend_store):
    _, store = backend_store
    svc = UserService(store)
    svc.create_user(NewUser(username="alice", email="a@x.com"))
    user = svc.get_user("alice")
    assert (user.username, user.email) == ("alice", "a@x.com")


def test_duplicate_does_not_alter_record_on_each_backend(backend_store):
    _, store = backend_store
    svc = UserService(store)
    svc.create_user(NewUser(username="alice", email="a@x.com"))
    before = svc.get_user("alice")
    with pytest.raises(DuplicateUsernameError):
        svc.create_user(NewUser(username="alice", email="other@x.com"))
    assert svc.get_user("alice") == before


def test_unknown_user_on_each_backend(backend_store):
    _, store = backend_store
    with pytest.raises(UserNotFoundError):
        UserService(store).get_user("bob")
