"""Converter exception hierarchy.

This module defines traceable domain errors with clear boundaries.
I/O and parse errors abort a run; validation errors only drop one label.
"""

from __future__ import annotations


class ClickpostError(Exception):
    """Base exception for all converter failures."""


class ClickpostConfigError(ClickpostError):
    """Raised for invalid runtime configuration."""


class ClickpostIOError(ClickpostError):
    """Raised when an input or output file cannot be opened, read, or written."""


class ClickpostParseError(ClickpostError):
    """Raised for malformed order exports and missing required columns."""


class ClickpostValidationError(ClickpostError):
    """Raised when a shipping label violates a Click Post field rule."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
