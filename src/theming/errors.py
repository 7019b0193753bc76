"""Structured errors raised by the theming engine."""

from __future__ import annotations

from typing import Any


class ThemingError(Exception):
    """Base class for theming related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class ColorFormatError(ThemingError, ValueError):
    """Raised when text does not match any recognized color notation."""

    def __init__(self, raw: Any, reason: str | None = None):
        message = f"Unrecognized color: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, context={"raw": raw})
        self.raw = raw


class OverrideValidationError(ThemingError, ValueError):
    """Raised when a theme override violates one of the configurator rules."""

    def __init__(self, message: str, *, rule: str, axis: str):
        super().__init__(message, context={"rule": rule, "axis": axis})
        self.rule = rule
        self.axis = axis


class BrandValidationError(ThemingError, RuntimeError):
    """Raised when a brand configuration file is malformed."""


__all__ = [
    "ThemingError",
    "ColorFormatError",
    "OverrideValidationError",
    "BrandValidationError",
]
