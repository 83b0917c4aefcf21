"""Student Records API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure → error envelope (api/error_handlers.py)
    - Every request logged before and after (RequestLoggingMiddleware)
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema creation on startup only when DATABASE_CREATE_SCHEMA is set; alembic owns production
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_records.api.error_handlers import register_error_handlers
from student_records.api.routes import health, students
from student_records.config import get_settings
from student_records.infrastructure.database import init_db
from student_records.infrastructure.observability import setup_logging
from student_records.infrastructure.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await manager.create_schema()
        logger.info("Database schema created")
    logger.info("Student Records API started")
    yield
    logger.info("Student Records API shutting down")
    await manager.close()


app = FastAPI(
    title="Student Records API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(students.router)

register_error_handlers(app)
