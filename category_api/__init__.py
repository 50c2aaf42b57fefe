"""
Category API - CRUD service for category records guarded by an API key.
"""
__version__ = "1.0.0"
