"""FastAPI dependency that requires an ApiKey credential."""

from __future__ import annotations

import logging

from fastapi import HTTPException, Request

from apikey_auth.services.auth import API_KEY_SCHEME, AuthHeaderError, extract_api_key

logger = logging.getLogger(__name__)


def require_api_key(request: Request) -> str:
    """Return the presented API key or reject the request with 401.

    Reuses the key ApiKeyAuthMiddleware stored on ``request.state`` when the
    middleware already ran for this request. The key is not checked against
    any store; routes that need that do it themselves with the returned value.
    """
    stored = getattr(request.state, "api_key", None)
    if stored is not None:
        return stored
    try:
        return extract_api_key(request.headers)
    except AuthHeaderError as exc:
        logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.kind.value)
        raise HTTPException(
            status_code=401,
            detail=exc.message,
            headers={"WWW-Authenticate": API_KEY_SCHEME},
        ) from exc
