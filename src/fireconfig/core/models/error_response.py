"""Parsing of Remote Config service error bodies."""
from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..errors import RemoteConfigErrorCode

RC_ERROR_TYPE = "type.googleapis.com/google.firebase.fcm.v1.FcmError"

REMOTE_CONFIG_ERROR_CODES: Mapping[str, RemoteConfigErrorCode] = MappingProxyType(
    {
        "INTERNAL": RemoteConfigErrorCode.INTERNAL,
    }
)


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class RemoteConfigServiceErrorResponse:
    """Read-only view over an error envelope of the form::

        {"error": {"status": ..., "message": ..., "details": [...]}}

    Every accessor degrades to ``None`` instead of raising when the envelope is
    missing or oddly shaped.
    """

    def __init__(self, error: Dict[str, Any] | None = None) -> None:
        self._error = error if isinstance(error, dict) else None

    @classmethod
    def parse(cls, text: str) -> "RemoteConfigServiceErrorResponse":
        """Parse a JSON body. Raises ``ValueError`` on malformed JSON."""
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Error response must be a JSON object")
        return cls(data.get("error"))

    @classmethod
    def safe_parse(cls, text: str | None) -> "RemoteConfigServiceErrorResponse":
        """Like :meth:`parse` but falls back to an empty instance.

        The server may answer with an empty or non-JSON payload (e.g. an HTML
        page from a proxy).
        """
        if text:
            try:
                return cls.parse(text)
            except ValueError:
                pass
        return cls()

    def status(self) -> str | None:
        if self._error is None:
            return None
        return _str_or_none(self._error.get("status"))

    def error_code(self) -> RemoteConfigErrorCode | None:
        if self._error is None:
            return None

        details = self._error.get("details")
        if not isinstance(details, list):
            return None

        for detail in details:
            if not isinstance(detail, dict):
                continue
            if detail.get("@type") == RC_ERROR_TYPE:
                code = _str_or_none(detail.get("errorCode"))
                return REMOTE_CONFIG_ERROR_CODES.get(code) if code is not None else None
        return None

    def message(self) -> str | None:
        if self._error is None:
            return None
        return _str_or_none(self._error.get("message"))
