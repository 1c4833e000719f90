"""Exceptions raised by the converter."""
from __future__ import annotations


class ConversionError(Exception):
    """Base class for converter errors."""


class SizeLimitExceeded(ConversionError, ValueError):
    """Input is larger than the converter accepts; nothing was processed."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Input markdown exceeds maximum size limit ({size} > {limit} characters)"
        )
        self.size = size
        self.limit = limit
