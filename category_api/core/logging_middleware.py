"""
HTTP Request/Response logging middleware for FastAPI.

Each request gets a short request_id, stored in ``request_id_var`` for the
duration of the request and returned in the ``X-Request-ID`` header. An
exception escaping the route is logged with its traceback and answered
with the 500 envelope, so failed requests keep their request id too.
"""
import time
import uuid
import logging
from typing import Any, Dict

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from category_api.utils.responses import web_response
from .logging_config import request_id_var

logger = logging.getLogger("category_api.middleware")

REQUEST_ID_HEADER = "X-Request-ID"


def _format_bytes(size: int) -> str:
    if size < 1024:
        return f"{size}B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f}KB"
    return f"{size / (1024 * 1024):.1f}MB"


def _format_duration(duration_ms: int) -> str:
    return f"{duration_ms / 1000:.1f}s" if duration_ms >= 1000 else f"{duration_ms}ms"


def _content_length(headers) -> int:
    try:
        return int(headers.get("content-length", "0"))
    except (ValueError, TypeError):
        return 0


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line when a request arrives and one when its response leaves."""

    SKIP_PATHS = frozenset({"/health", "/openapi.json", "/docs", "/redoc", "/favicon.ico"})

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.SKIP_PATHS:
            return await call_next(request)

        req_id = uuid.uuid4().hex[:12]
        token = request_id_var.set(req_id)
        try:
            response = await self._handle(request, call_next)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = req_id
        return response

    async def _handle(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        extra: Dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else "unknown",
        }

        req_size = _content_length(request.headers)
        logger.info(
            f"→ {request.method} {target} {_format_bytes(req_size)}",
            extra={**extra, "request_size": req_size},
        )

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"✗ {request.method} {target} - {type(exc).__name__}: {exc}",
                extra=extra,
                exc_info=True,
            )
            response = web_response(status.HTTP_500_INTERNAL_SERVER_ERROR)
        duration_ms = round((time.perf_counter() - started) * 1000)

        resp_size = _content_length(response.headers)
        logger.log(
            _level_for(response.status_code),
            f"← {response.status_code} {request.method} {target} "
            f"{_format_duration(duration_ms)} {_format_bytes(resp_size)}",
            extra={
                **extra,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
                "response_size": resp_size,
            },
        )
        return response
