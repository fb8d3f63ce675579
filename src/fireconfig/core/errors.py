"""Core exception hierarchy and error codes."""
from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Canonical platform error codes shared by all Firebase services."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    FAILED_PRECONDITION = "FAILED_PRECONDITION"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    ABORTED = "ABORTED"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"
    CANCELLED = "CANCELLED"
    DATA_LOSS = "DATA_LOSS"
    UNKNOWN = "UNKNOWN"
    INTERNAL = "INTERNAL"
    UNAVAILABLE = "UNAVAILABLE"
    DEADLINE_EXCEEDED = "DEADLINE_EXCEEDED"


class RemoteConfigErrorCode(str, Enum):
    """Remote Config specific error codes."""

    INTERNAL = "INTERNAL"


class FireconfigError(Exception):
    """Base class for fireconfig errors."""


class ConfigError(FireconfigError):
    """Configuration resolution error (raised before any network call)."""


class RemoteConfigError(FireconfigError):
    """Error returned by, or while talking to, the Remote Config service.

    ``code`` is always set. ``error_code`` is only set when the response body
    carried a recognized Remote Config error detail. ``http_response`` is the
    raw ``requests.Response`` when the server answered at all.
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        error_code: RemoteConfigErrorCode | None = None,
        http_response: Any = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.error_code = error_code
        self.http_response = http_response

    @property
    def message(self) -> str:
        return str(self)
