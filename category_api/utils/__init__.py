"""
Utilities module for the Category API.
"""
from .exceptions import (
    CategoryAPIException,
    CategoryNotFoundError,
    ValidationError,
    UnauthorizedError
)
from .responses import status_text, web_response

__all__ = [
    "CategoryAPIException",
    "CategoryNotFoundError",
    "ValidationError",
    "UnauthorizedError",
    "status_text",
    "web_response",
]
