"""Core models."""

from .error_response import RC_ERROR_TYPE, RemoteConfigServiceErrorResponse
from .hashing import RepeatableHash, Sha256
from .template import RemoteConfigTemplate

__all__ = [
    "RC_ERROR_TYPE",
    "RemoteConfigServiceErrorResponse",
    "RepeatableHash",
    "Sha256",
    "RemoteConfigTemplate",
]
