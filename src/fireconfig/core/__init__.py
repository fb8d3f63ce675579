"""Core models and helpers for fireconfig (no network, no environment reads)."""

from . import config, errors

__all__ = ["config", "errors"]
