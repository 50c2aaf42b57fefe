"""
Custom exceptions for the Category API.
"""
from typing import Dict, List, Optional


class CategoryAPIException(Exception):
    """Base exception for the Category API."""
    pass


class CategoryNotFoundError(CategoryAPIException):
    """Raised when a category is not found."""
    def __init__(self, category_id: int):
        self.category_id = category_id
        super().__init__(f"Category not found: {category_id}")


class ValidationError(CategoryAPIException):
    """Raised when a request DTO breaks a validation rule."""
    def __init__(self, errors: Optional[Dict[str, List[str]]] = None, message: Optional[str] = None):
        self.errors = errors or {}
        if message is None:
            message = "; ".join(
                f"{field}: {problem}"
                for field, problems in self.errors.items()
                for problem in problems
            ) or "Invalid request"
        super().__init__(message)


class UnauthorizedError(CategoryAPIException):
    """Raised when the API key is missing or wrong."""
    def __init__(self, message: str = "Invalid or missing API key"):
        super().__init__(message)
