"""Environment-driven settings.

APIKEY_AUTH_NO_AUTH=true turns the middleware off (dev mode).
APIKEY_AUTH_PUBLIC_PATHS adds comma-separated paths that skip the key check;
/api/health is always public.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, field_validator

DEFAULT_PUBLIC_PATHS = frozenset({"/api/health"})


def _split_csv(raw: str) -> list[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings(BaseModel):
    auth_enabled: bool = True
    public_paths: frozenset[str] = DEFAULT_PUBLIC_PATHS
    cors_origins: list[str] = ["http://localhost:5173"]

    @field_validator("public_paths")
    @classmethod
    def validate_public_paths(cls, v: frozenset[str]) -> frozenset[str]:
        for path in v:
            if not path.startswith("/"):
                raise ValueError(f"public path must start with '/': {path!r}")
        return v | DEFAULT_PUBLIC_PATHS


def get_settings() -> Settings:
    """Read settings from the environment.

    Read on every call so that tests can patch os.environ.
    """
    return Settings(
        auth_enabled=os.environ.get("APIKEY_AUTH_NO_AUTH", "").lower() != "true",
        public_paths=frozenset(_split_csv(os.environ.get("APIKEY_AUTH_PUBLIC_PATHS", ""))),
        cors_origins=_split_csv(os.environ.get("CORS_ORIGINS", "http://localhost:5173")),
    )
