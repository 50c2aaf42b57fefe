"""
API key middleware.

Every request must carry ``X-API-KEY`` equal to the configured secret;
anything else is answered with a 401 envelope before routing happens.
"""
import logging
import secrets

from fastapi import status
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from category_api.utils.responses import web_response

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-API-KEY"


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Rejects requests whose X-API-KEY header does not match ``api_key``."""

    def __init__(self, app: ASGIApp, api_key: str):
        super().__init__(app)
        self.api_key = api_key

    def is_authorized(self, request: Request) -> bool:
        supplied = request.headers.get(API_KEY_HEADER, "")
        if not supplied or not self.api_key:
            return False
        return secrets.compare_digest(supplied.encode("utf-8"), self.api_key.encode("utf-8"))

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self.is_authorized(request):
            logger.warning(f"Rejected API key - {request.method} {request.url.path}")
            return web_response(status.HTTP_401_UNAUTHORIZED)

        return await call_next(request)
