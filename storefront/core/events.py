"""
Application lifecycle events
Handles startup and shutdown tasks
"""

from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager

from .database import init_db, close_db, get_db_context
from .logging import setup_logging
from .seed import seed_demo_catalog
from .config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager
    Handles startup and shutdown events
    """
    # Startup
    try:
        setup_logging()
        logger.info(f"Starting {settings.APP_NAME}...")

        await init_db()

        if settings.SEED_DATA:
            async with get_db_context() as db:
                await seed_demo_catalog(db)

        logger.info(f"{settings.APP_NAME} started successfully")

        yield

    finally:
        # Shutdown
        logger.info(f"Shutting down {settings.APP_NAME}...")
        await close_db()
        logger.info(f"{settings.APP_NAME} shutdown complete")
