"""matchfeed API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to {"success": false, "error": ...}
    - CORS configured from settings (not hardcoded)
    - Database pool opened on startup and closed on shutdown via lifespan
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from matchfeed.api.error_handlers import register_error_handlers
from matchfeed.api.routes import commentary, health, matches
from matchfeed.config import get_settings
from matchfeed.infrastructure.database import close_db, init_db
from matchfeed.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("matchfeed API started")
    yield
    logger.info("matchfeed API shutting down")
    await close_db()


app = FastAPI(title="matchfeed API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(matches.router)
app.include_router(commentary.router)

register_error_handlers(app)


@app.get("/")
async def root():
    return {"message": "Welcome to the server!"}
