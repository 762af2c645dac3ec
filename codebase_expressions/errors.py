"""Errors raised by the expression core."""

from __future__ import annotations


class ConfigurationError(Exception):
    """An expression was assembled from structurally incompatible parts.

    Raised from model validators. Not a ValueError subclass, so pydantic
    re-raises it unchanged rather than wrapping it in a ValidationError.
    """
