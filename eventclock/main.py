"""Event Clock API - FastAPI application exposing clock diagnostics.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EventClockError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Reference timezone resolved on startup via lifespan, before the first request

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Eager resolution at startup: the fallback warning lands in startup logs
      instead of in the middle of the first request
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventclock.api.error_handlers import register_error_handlers
from eventclock.api.routes import clock, health
from eventclock.clock import reference_timezone
from eventclock.config import get_settings
from eventclock.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    handler = setup_logging(settings.log_level, settings.log_format)
    reference = reference_timezone()
    logger.info(
        "Event clock API started",
        extra={
            "timezone_key": reference.key,
            "timezone_namespace": reference.namespace.value,
        },
    )
    yield
    logger.info("Event clock API shutting down")
    logging.root.removeHandler(handler)


app = FastAPI(
    title="Event Clock API", version=health.VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(clock.router)

register_error_handlers(app)
