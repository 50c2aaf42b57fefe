"""
Category controller: turns service results into envelope responses.

Failures are not caught here; they propagate to the exception handlers
registered in ``category_api.core.app``, which write the same envelope.
"""
from fastapi import status
from fastapi.responses import JSONResponse

from category_api.schemas import CategoryCreateRequest, CategoryUpdateRequest
from category_api.services import CategoryService
from category_api.utils.responses import web_response


class CategoryController:
    """Controller for category operations."""

    def __init__(self, category_service: CategoryService):
        self.category_service = category_service

    async def create(self, request: CategoryCreateRequest) -> JSONResponse:
        """Create a new category."""
        category = await self.category_service.create(request)
        return web_response(status.HTTP_200_OK, category)

    async def update(self, category_id: int, request: CategoryUpdateRequest) -> JSONResponse:
        """Rename a category."""
        category = await self.category_service.update(request, category_id)
        return web_response(status.HTTP_200_OK, category)

    async def delete(self, category_id: int) -> JSONResponse:
        """Delete a category."""
        await self.category_service.delete(category_id)
        return web_response(status.HTTP_200_OK)

    async def find_by_id(self, category_id: int) -> JSONResponse:
        """Get a category by ID."""
        category = await self.category_service.find_by_id(category_id)
        return web_response(status.HTTP_200_OK, category)

    async def find_all(self) -> JSONResponse:
        """Get all categories."""
        categories = await self.category_service.find_all()
        return web_response(status.HTTP_200_OK, categories)
