"""
FastAPI application factory.

Creates and configures the FastAPI application.
"""
from typing import Optional
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from category_api import __version__
from category_api.config.settings import Settings, get_settings
from category_api.utils.exceptions import CategoryNotFoundError, ValidationError
from category_api.utils.responses import web_response
from .auth_middleware import ApiKeyMiddleware
from .dependencies import Container, get_container
from .lifespan import lifespan
from .logging_config import setup_logging
from .logging_middleware import RequestLoggingMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with; defaults to the cached
            environment settings.

    Returns:
        Configured FastAPI application instance.
    """
    # ── Initialize logging first ──
    settings = settings or get_settings()
    setup_logging(
        log_level=settings.log_level,
        log_dir=settings.log_dir,
        log_json=settings.log_json,
    )

    app = FastAPI(
        title="Category API",
        description="CRUD API for category records, guarded by an X-API-KEY header.",
        version=__version__,
        lifespan=lifespan
    )
    app.state.container = Container(settings)

    # Middleware added last runs first: CORS -> request logging -> API key
    app.add_middleware(ApiKeyMiddleware, api_key=settings.api_key)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    _register_exception_handlers(app)
    _include_routers(app)
    _register_root_endpoints(app)

    return app


def _describe_request_errors(exc: RequestValidationError) -> str:
    """Flatten FastAPI's error list into ``loc: msg`` pairs."""
    parts = []
    for error in exc.errors():
        loc = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{loc}: {error.get('msg', 'invalid')}" if loc else error.get("msg", "invalid"))
    return "; ".join(parts) or "Invalid request"


def _register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers that answer with the envelope."""

    @app.exception_handler(CategoryNotFoundError)
    async def category_not_found_handler(request: Request, exc: CategoryNotFoundError):
        logger.warning(f"Category not found: {exc.category_id} - {request.method} {request.url.path}")
        return web_response(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.warning(f"Validation error: {exc} - {request.method} {request.url.path}")
        return web_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _describe_request_errors(exc)
        logger.warning(f"Malformed request: {message} - {request.method} {request.url.path}")
        return web_response(status.HTTP_400_BAD_REQUEST, message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.warning(f"HTTP {exc.status_code}: {exc.detail} - {request.method} {request.url.path}")
        return web_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} - {request.method} {request.url.path}",
            exc_info=exc,
        )
        return web_response(status.HTTP_500_INTERNAL_SERVER_ERROR)


def _include_routers(app: FastAPI) -> None:
    """Include all API routers."""
    from category_api.routers import category_router

    app.include_router(category_router.router)


def _register_root_endpoints(app: FastAPI) -> None:
    """Register the health endpoint."""

    @app.get("/health")
    async def health_check(request: Request):
        """Health check endpoint."""
        container = get_container(request)
        database_up = await container.database.ping()
        return web_response(
            status.HTTP_200_OK if database_up else status.HTTP_503_SERVICE_UNAVAILABLE,
            {"database": "connected" if database_up else "disconnected"},
        )
