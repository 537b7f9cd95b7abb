"""Application lifespan: startup and shutdown.

Single place for startup/shutdown wiring: logging on startup, database
engine dispose on shutdown. No business logic.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from family_circles.core.config import get_settings
from family_circles.infrastructure.persistence.database import dispose_engine
from family_circles.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging, then yield; on exit dispose the database engine."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "Starting %s %s (base_url=%s)",
        settings.app_name,
        settings.app_version,
        settings.base_url or "<from request>",
    )

    yield

    await dispose_engine()
    logger.info("Shutdown complete")
