"""
Common schemas used across the application.
"""
from pydantic import BaseModel
from typing import Any


class WebResponse(BaseModel):
    """Uniform envelope wrapping every HTTP response."""
    code: int
    status: str
    data: Any = None
