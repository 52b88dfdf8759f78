"""Errors raised by the API client layer."""

from typing import Optional


class ApiError(Exception):
    """A failed API call. The message carries the HTTP status as a ``[code]`` prefix when known."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ApiNetworkError(ApiError):
    """The request never produced a response (connection refused, DNS, timeout)."""
