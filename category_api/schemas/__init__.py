"""
Schemas module for the Category API.
"""
from .common import WebResponse
from .category import (
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
    CategoryResponse
)

__all__ = [
    # Common
    "WebResponse",
    # Category
    "Category",
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
    "CategoryResponse",
]
