from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from message_api.config import allowed_origins, configure_logging
from message_api.database import configure_database, init_db
from message_api.services import DatabaseMessageService, MessageService
from message_api.views import health_router, message_router


_logger = logging.getLogger(__name__)


def _database_lifespan(database_url: str | None):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Create missing tables on startup."""
        init_db(database_url)
        yield

    return lifespan


def create_app(
    *,
    database_url: str | None = None,
    message_service: MessageService | None = None,
) -> FastAPI:
    # Configure logging first
    configure_logging()

    lifespan = None
    if message_service is None:
        # Only the default service needs the database; tables are created at startup
        configure_database(database_url)
        lifespan = _database_lifespan(database_url)
        message_service = DatabaseMessageService()

    app = FastAPI(
        title="Message API",
        version="1.0.0",
        description="CRUD HTTP API for creating, reading, updating, deleting and listing messages.",
        lifespan=lifespan,
    )
    app.state.message_service = message_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include all routers by type
    app.include_router(health_router)
    app.include_router(message_router)

    _logger.info(f"Application created with {type(message_service).__name__}")
    return app


app = create_app()
