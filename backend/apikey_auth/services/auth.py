"""API key extraction from the Authorization header.

The expected header shape is ``Authorization: ApiKey <key>``. Extraction only
parses the header; checking the key against a store is left to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

API_KEY_SCHEME = "ApiKey"
AUTHORIZATION_HEADER = "Authorization"


class AuthErrorKind(str, Enum):
    MISSING_HEADER = "missing_header"
    MALFORMED_HEADER = "malformed_header"


MISSING_HEADER = AuthErrorKind.MISSING_HEADER
MALFORMED_HEADER = AuthErrorKind.MALFORMED_HEADER


class AuthHeaderError(Exception):
    """Base error for an unusable Authorization header.

    Match on ``kind`` (or the subclass), not on the message text.
    """

    def __init__(self, kind: AuthErrorKind, message: str) -> None:
        self.kind = AuthErrorKind(kind)
        self.message = message
        super().__init__(message)


class MissingAuthHeaderError(AuthHeaderError):
    def __init__(self, message: str = "no authorization header included") -> None:
        super().__init__(AuthErrorKind.MISSING_HEADER, message)


class MalformedAuthHeaderError(AuthHeaderError):
    def __init__(self, message: str = "malformed authorization header") -> None:
        super().__init__(AuthErrorKind.MALFORMED_HEADER, message)


def _as_str(value: str | bytes) -> str:
    return value.decode("latin-1") if isinstance(value, bytes) else value


def _first_header_value(headers: Any, name: str) -> str | None:
    """Return the first value of ``name``, matching the name case-insensitively."""
    # Starlette Headers / MutableHeaders are already case-insensitive multi-dicts
    getlist = getattr(headers, "getlist", None)
    if callable(getlist):
        values = getlist(name)
        return values[0] if values else None

    if not isinstance(headers, Mapping):
        raise TypeError(f"unsupported header collection: {type(headers).__name__}")

    wanted = name.lower()
    for key, value in headers.items():
        if not isinstance(key, (str, bytes)) or _as_str(key).lower() != wanted:
            continue
        if isinstance(value, (str, bytes)):
            return _as_str(value)
        values = list(value)
        return _as_str(values[0]) if values else None
    return None


def extract_api_key(headers: Any) -> str:
    """Extract the API key from ``Authorization: ApiKey <key>``.

    Only the first Authorization value is read, and the value is split on
    single spaces: ``"ApiKey a b"`` yields ``"a"`` and ``"ApiKey "`` yields
    an empty string.

    Raises:
        MissingAuthHeaderError: the header is absent or empty.
        MalformedAuthHeaderError: the value is not ``ApiKey <key>``.
    """
    auth = _first_header_value(headers, AUTHORIZATION_HEADER)
    if not auth:
        raise MissingAuthHeaderError()

    parts = auth.split(" ")
    if len(parts) < 2 or parts[0] != API_KEY_SCHEME:
        raise MalformedAuthHeaderError()

    return parts[1]
