"""
Shared fixtures: a temporary SQLite store and a mongomock-backed store,
both with their uniqueness constraint created the way the schema step does.
"""
from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import mongomock
import pytest

# Garante que o pacote users_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from users_api.core import config as core_config  # noqa: E402
from users_api.db.create_tables import create_relational_schema  # noqa: E402
from users_api.db.mongo import ensure_username_index  # noqa: E402
from users_api.db.session import create_db_engine  # noqa: E402
from users_api.repositories.document_repository import MongoUserStore  # noqa: E402
from users_api.repositories.sql_repository import SQLUserStore  # noqa: E402


@pytest.fixture()
def settings(tmp_path, monkeypatch):
    """Settings pointing at a temporary SQLite file; caches reset around the test."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("STORAGE_BACKEND", "relational")
    core_config.get_settings.cache_clear()
    yield core_config.get_settings()
    core_config.get_settings.cache_clear()


@pytest.fixture()
def sql_store(settings):
    engine = create_db_engine(settings.database_url)
    create_relational_schema(engine)
    store = SQLUserStore(engine)
    yield store
    store.close()


@pytest.fixture()
def mongo_store():
    client = mongomock.MongoClient()
    database = client["otus"]
    ensure_username_index(database)
    store = MongoUserStore(database)
    yield store
    store.close()


@pytest.fixture(params=["relational", "document"])
def backend_store(request, settings):
    """Yields ``(settings, store)`` once per backend."""
    if request.param == "relational":
        store = request.getfixturevalue("sql_store")
    else:
        store = request.getfixturevalue("mongo_store")
    yield dataclasses.replace(settings, storage_backend=request.param), store
