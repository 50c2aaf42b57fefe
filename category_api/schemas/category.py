"""
Category schemas.
"""
from pydantic import BaseModel
from typing import Optional


class Category(BaseModel):
    """Persisted category record. ``id`` is unset until the row is inserted."""
    id: Optional[int] = None
    name: str


class CategoryCreateRequest(BaseModel):
    """Request to create a category."""
    name: str


class CategoryUpdateRequest(BaseModel):
    """Request to rename a category."""
    name: str


class CategoryResponse(BaseModel):
    """Response for category operations."""
    id: int
    name: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryResponse":
        return cls(id=category.id, name=category.name)
