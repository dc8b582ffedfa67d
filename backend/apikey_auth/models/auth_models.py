"""Pydantic models for the auth endpoints."""

from pydantic import BaseModel

from apikey_auth.services.auth import API_KEY_SCHEME


class HealthResponse(BaseModel):
    status: str = "ok"


class AuthCheckResponse(BaseModel):
    authenticated: bool
    scheme: str = API_KEY_SCHEME
