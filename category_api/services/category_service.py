"""
Category service: transaction boundary, validation and DTO mapping.
"""
from typing import List

from category_api.repositories import CategoryRepository, Database
from category_api.schemas import (
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
    CategoryResponse
)
from category_api.utils.exceptions import CategoryNotFoundError
from .validation import validate


class CategoryService:
    """
    Business operations on categories.

    Every method runs in its own transaction: it commits when the method
    returns and rolls back when anything raises, validation failures included.
    """

    def __init__(self, database: Database, category_repo: CategoryRepository):
        self.database = database
        self.category_repo = category_repo

    async def create(self, request: CategoryCreateRequest) -> CategoryResponse:
        """Validate and insert a new category."""
        async with self.database.transaction() as conn:
            validate(request)
            category = await self.category_repo.save(conn, Category(name=request.name))
            return CategoryResponse.from_category(category)

    async def update(self, request: CategoryUpdateRequest, category_id: int) -> CategoryResponse:
        """Validate and rename an existing category."""
        async with self.database.transaction() as conn:
            validate(request)
            category = await self.category_repo.find_by_id(conn, category_id)
            if category is None:
                raise CategoryNotFoundError(category_id)

            category.name = request.name
            category = await self.category_repo.update(conn, category)
            return CategoryResponse.from_category(category)

    async def delete(self, category_id: int) -> None:
        """Delete an existing category."""
        async with self.database.transaction() as conn:
            category = await self.category_repo.find_by_id(conn, category_id)
            if category is None:
                raise CategoryNotFoundError(category_id)

            await self.category_repo.delete(conn, category)

    async def find_by_id(self, category_id: int) -> CategoryResponse:
        """Get a category by ID."""
        async with self.database.transaction() as conn:
            category = await self.category_repo.find_by_id(conn, category_id)
            if category is None:
                raise CategoryNotFoundError(category_id)
            return CategoryResponse.from_category(category)

    async def find_all(self) -> List[CategoryResponse]:
        """Get all categories."""
        async with self.database.transaction() as conn:
            categories = await self.category_repo.find_all(conn)
            return [CategoryResponse.from_category(category) for category in categories]
