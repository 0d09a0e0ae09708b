"""User CRUD API — FastAPI application entry point and composition root.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserApiError → failure envelope
    - CORS configured from settings (not hardcoded)
    - The DatabaseSessionManager is built by the lifespan and lives on app.state;
      no module holds a persistence client

Design Decisions:
    - create_app(settings) factory: tests and scripts build isolated apps,
      uvicorn serves the module-level `app`
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.config import Settings, get_settings
from user_api.infrastructure.database import DatabaseSessionManager
from user_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await db_manager.create_tables()
    app.state.db_manager = db_manager
    logger.info("User API started")
    yield
    logger.info("User API shutting down")
    app.state.db_manager = None
    await db_manager.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="User CRUD API", version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router, prefix=settings.crud_prefix)
    return app


app = create_app()
