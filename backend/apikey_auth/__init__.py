"""Extract ApiKey credentials from HTTP Authorization headers."""

from apikey_auth.services.auth import (
    API_KEY_SCHEME,
    MALFORMED_HEADER,
    MISSING_HEADER,
    AuthErrorKind,
    AuthHeaderError,
    MalformedAuthHeaderError,
    MissingAuthHeaderError,
    extract_api_key,
)

__all__ = [
    "API_KEY_SCHEME",
    "MALFORMED_HEADER",
    "MISSING_HEADER",
    "AuthErrorKind",
    "AuthHeaderError",
    "MalformedAuthHeaderError",
    "MissingAuthHeaderError",
    "extract_api_key",
]
