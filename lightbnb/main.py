"""
Data-access lifecycle entry point.
Configures logging and owns the service for the life of the process.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

from lightbnb.config import Settings, get_settings
from lightbnb.database import check_connection
from lightbnb.services.lightbnb import LightBnBService

logger = logging.getLogger(__name__)


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


@asynccontextmanager
async def lifespan(settings: Optional[Settings] = None) -> AsyncIterator[LightBnBService]:
    """
    Service lifespan manager.
    Handles startup and shutdown.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    # Startup
    logger.info(f"Starting {settings.app_name} data access")
    logger.info(f"Environment: {settings.environment}")
    service = LightBnBService.from_settings(settings)

    # The web layer keeps serving on a failed check; queries will log their own failures
    db_connected = await check_connection(service.executor)
    if not db_connected:
        logger.error("Failed to connect to database on startup")

    try:
        yield service
    finally:
        # Shutdown
        logger.info("Shutting down data access")
        await service.close()
