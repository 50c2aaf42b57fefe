"""
Dependency injection container.

One Container is built per application and kept on ``app.state``; request
handlers reach it through the dependency functions below.
"""
from typing import Optional
import logging

from fastapi import Request

from category_api.config.settings import Settings
from category_api.repositories import CategoryRepository, Database
from category_api.services import CategoryService
from category_api.controllers import CategoryController

logger = logging.getLogger(__name__)


class Container:
    """Wires Database -> Repository -> Service -> Controller."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.database = Database(settings)

        self.category_repo = CategoryRepository()
        self.category_service: Optional[CategoryService] = None
        self.category_controller: Optional[CategoryController] = None

    async def initialize(self) -> None:
        """Initialize all components (called at startup)."""
        logger.info("Initializing dependency container...")
        await self.database.connect()

        self.category_service = CategoryService(self.database, self.category_repo)
        self.category_controller = CategoryController(self.category_service)

        logger.info("Dependency container initialized")

    async def shutdown(self) -> None:
        """Cleanup on shutdown."""
        logger.info("Shutting down dependency container...")
        await self.database.disconnect()
        logger.info("Dependency container shutdown complete")


# Dependency functions for FastAPI
def get_container(request: Request) -> Container:
    """Get the DI container of the running application."""
    return request.app.state.container


def get_category_controller(request: Request) -> CategoryController:
    """Dependency for category controller."""
    return get_container(request).category_controller
