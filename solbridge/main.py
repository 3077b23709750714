"""SolBridge API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map SolbridgeError → {"success": false, "error": ...}
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Error handlers extracted to api/error_handlers.py (ADR: import fan-out < 10)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solbridge import __version__
from solbridge.api.error_handlers import register_error_handlers
from solbridge.api.routes import health, keypair, message, send, token
from solbridge.config import get_settings
from solbridge.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info("SolBridge API started")
    yield
    logger.info("SolBridge API shutting down")


app = FastAPI(title="SolBridge API", version=__version__, lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(keypair.router)
app.include_router(token.router)
app.include_router(message.router)
app.include_router(send.router)

register_error_handlers(app)
