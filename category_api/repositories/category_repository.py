"""
Category repository for database operations.

Every method runs inside the transaction supplied by the caller; the
repository itself holds no connection state.
"""
from typing import Optional, List
import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncConnection

from category_api.schemas import Category
from .tables import category_table

logger = logging.getLogger(__name__)


class CategoryRepository:
    """Repository for category CRUD operations."""

    async def save(self, conn: AsyncConnection, category: Category) -> Category:
        """Insert a new row and return the category with its generated id."""
        result = await conn.execute(
            insert(category_table).values(name=category.name)
        )
        category_id = result.inserted_primary_key[0]

        logger.info(f"Created category: {category_id} - {category.name}")
        return Category(id=category_id, name=category.name)

    async def update(self, conn: AsyncConnection, category: Category) -> Category:
        """Rename the row matching ``category.id``. Missing rows are left alone."""
        result = await conn.execute(
            update(category_table)
            .where(category_table.c.id == category.id)
            .values(name=category.name)
        )

        if result.rowcount > 0:
            logger.info(f"Updated category: {category.id}")
        return category

    async def delete(self, conn: AsyncConnection, category: Category) -> None:
        """Delete the row matching ``category.id``."""
        result = await conn.execute(
            delete(category_table).where(category_table.c.id == category.id)
        )
        if result.rowcount > 0:
            logger.info(f"Deleted category: {category.id}")

    async def find_by_id(self, conn: AsyncConnection, category_id: int) -> Optional[Category]:
        """Get a category by ID."""
        result = await conn.execute(
            select(category_table.c.id, category_table.c.name)
            .where(category_table.c.id == category_id)
        )
        row = result.first()
        if row:
            return Category(id=row.id, name=row.name)
        return None

    async def find_all(self, conn: AsyncConnection) -> List[Category]:
        """Get all categories in ascending id order."""
        result = await conn.execute(
            select(category_table.c.id, category_table.c.name)
            .order_by(category_table.c.id)
        )
        return [Category(id=row.id, name=row.name) for row in result]
