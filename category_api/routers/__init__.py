"""
Routers module for the Category API.
"""
from . import category_router

__all__ = [
    "category_router",
]
