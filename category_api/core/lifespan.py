"""
Application lifespan management.

Handles startup and shutdown events.
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI
import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Initializes all components at startup and cleans up at shutdown.
    """
    container = app.state.container

    # Startup
    logger.info("Starting Category API...")
    await container.initialize()
    logger.info("Category API started successfully")

    yield

    # Shutdown
    logger.info("Shutting down Category API...")
    await container.shutdown()
    logger.info("Category API shutdown complete")
