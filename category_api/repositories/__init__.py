"""
Repositories module for the Category API.
"""
from .base import Database
from .category_repository import CategoryRepository
from .tables import CATEGORY_NAME_MAX_LENGTH, category_table, metadata

__all__ = [
    "Database",
    "CategoryRepository",
    "CATEGORY_NAME_MAX_LENGTH",
    "category_table",
    "metadata",
]
