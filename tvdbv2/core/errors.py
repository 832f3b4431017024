"""Exceptions raised by the TVDB client."""

from __future__ import annotations

from typing import Any


class TVDBError(Exception):
    """Base class for errors reported by the TVDB client."""


class APIError(TVDBError):
    """The API answered with a non-empty error field.

    ``data`` holds whatever payload was decoded alongside the error; it is
    best-effort and may be incomplete.
    """

    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.data = data


class LoginError(TVDBError):
    """Raised when the client cannot obtain a token at construction time."""


class ResponseDecodeError(TVDBError, ValueError):
    """The response body is valid JSON but not in the expected shape."""
