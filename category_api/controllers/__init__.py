"""
Controllers module for the Category API.
"""
from .category_controller import CategoryController

__all__ = [
    "CategoryController",
]
