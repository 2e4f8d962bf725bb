"""Task API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TaskApiError → uniform {success: false, message} envelope
    - CORS configured from settings (not hardcoded)
    - One DatabaseSessionManager per process: created on startup, disposed on
      shutdown, reachable only through app.state

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py to keep this module's
      import fan-out small
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from task_api.api.error_handlers import register_error_handlers
from task_api.api.routes import health, tasks
from task_api.config import get_settings
from task_api.infrastructure.database import DatabaseSessionManager
from task_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        if settings.database_create_tables:
            await db_manager.create_all()
        app.state.db_manager = db_manager
        logger.info("Task API started")
        yield
    finally:
        logger.info("Task API shutting down")
        app.state.db_manager = None
        await db_manager.close()


app = FastAPI(
    title="Task API", version="1.0.0", lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(tasks.router)

register_error_handlers(app)
