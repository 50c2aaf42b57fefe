"""
Category API entry point.

Logging is configured automatically by create_app() via logging_config.
"""
from category_api.core import create_app

# Create FastAPI application
app = create_app()


if __name__ == "__main__":
    import uvicorn
    from category_api.config.settings import get_settings

    settings = get_settings()
    uvicorn.run(
        "category_api.main:app",
        host=settings.host,
        port=settings.port,
    )
