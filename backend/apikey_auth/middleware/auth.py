"""ApiKey authentication middleware.

Requires ``Authorization: ApiKey <key>`` on all /api/* paths except the
configured public ones, and stores the key on ``request.state.api_key``.
"""

from __future__ import annotations

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from apikey_auth.config import get_settings
from apikey_auth.services.auth import API_KEY_SCHEME, AuthHeaderError, extract_api_key

logger = logging.getLogger(__name__)


class ApiKeyAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        # Routes outside /api/ carry no credentials
        if not path.startswith("/api/"):
            return await call_next(request)

        settings = get_settings()
        if not settings.auth_enabled or path in settings.public_paths:
            return await call_next(request)

        try:
            request.state.api_key = extract_api_key(request.headers)
        except AuthHeaderError as exc:
            logger.debug("Rejected %s %s: %s", request.method, path, exc.kind.value)
            return JSONResponse(
                status_code=401,
                content={"detail": exc.message, "error": exc.kind.value},
                headers={"WWW-Authenticate": API_KEY_SCHEME},
            )

        return await call_next(request)
