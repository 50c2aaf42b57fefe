"""
Configuration module for the Category API.
"""
from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
