"""
Core module for Category API application setup.
"""
from .app import create_app
from .dependencies import Container, get_category_controller

__all__ = [
    "create_app",
    "Container",
    "get_category_controller",
]
