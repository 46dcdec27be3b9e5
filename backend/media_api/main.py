"""Media API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MediaApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Store created empty on startup and dropped on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Run with: uvicorn media_api.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from media_api.api.error_handlers import register_error_handlers
from media_api.api.routes import health, media
from media_api.config import get_settings
from media_api.infrastructure.memory_store import close_store, init_store
from media_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_store()
    logger.info(
        f"Media API started (strict_not_found={settings.strict_not_found})",
    )
    yield
    close_store()
    logger.info("Media API shutting down")


app = FastAPI(
    title="Media API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(media.router)

register_error_handlers(app)
