"""
Services module for the Category API.
"""
from .category_service import CategoryService
from .validation import validate

__all__ = [
    "CategoryService",
    "validate",
]
