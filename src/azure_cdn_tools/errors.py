"""Errors raised by the CDN tools."""
from __future__ import annotations

from typing import Sequence


class ConfigurationError(ValueError):
    """Required settings are missing or empty."""

    def __init__(self, message: str, fields: Sequence[str] = ()):
        super().__init__(message)
        self.fields = tuple(fields)
