"""
Application factory for the users API.

The store is built once per app from ``Settings`` (or injected), shared by
every request through ``app.state.user_service`` and closed on shutdown.

    uvicorn users_api.app:create_app --factory
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from users_api.core.config import DOCUMENT_BACKEND, RELATIONAL_BACKEND, Settings, get_settings
from users_api.core.logging_config import setup_logging
from users_api.db.mongo import create_mongo_client
from users_api.db.session import create_db_engine
from users_api.repositories.base import UserStore
from users_api.repositories.document_repository import MongoUserStore
from users_api.repositories.sql_repository import SQLUserStore
from users_api.routers import users as users_router
from users_api.services.user_service import UserService

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> UserStore:
    """Select the concrete store for ``settings.storage_backend``."""
    if settings.storage_backend == DOCUMENT_BACKEND:
        client = create_mongo_client(settings.mongo_url, settings.mongo_timeout_ms)
        return MongoUserStore(client[settings.mongo_database])
    if settings.storage_backend == RELATIONAL_BACKEND:
        return SQLUserStore(create_db_engine(settings.database_url))
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.storage_backend!r}")


async def _malformed_request(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse({"detail": jsonable_encoder(exc.errors())}, status_code=400)


def create_app(settings: Settings | None = None, store: UserStore | None = None) -> FastAPI:
    """Build the app; ``store`` overrides the one ``settings`` would select."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)
    if store is None:
        store = build_store(settings)
    logger.info("Using %s backend (%s)", settings.storage_backend, type(store).__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        logger.info("Closing %s", type(store).__name__)
        store.close()

    app = FastAPI(title="Users API", lifespan=lifespan)
    app.state.settings = settings
    app.state.user_service = UserService(store)
    app.add_exception_handler(RequestValidationError, _malformed_request)
    app.include_router(users_router.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "backend": settings.storage_backend}

    return app
