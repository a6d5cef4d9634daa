"""Exception hierarchy for gaussref.

Each error also derives from the closest builtin so callers can catch
``ValueError`` or ``OverflowError`` without importing this module.
"""

from __future__ import annotations


class Error(Exception):
    """Base error."""


class InvalidArgumentError(Error, ValueError):
    """Argument outside the function's domain."""


class RecursionDepthError(Error, RecursionError):
    """Requested recursion deeper than the configured ceiling."""


class ArithmeticOverflowError(Error, OverflowError):
    """Intermediate value left the signed 32-bit range."""

    def __init__(self, operation: str, value: int) -> None:
        super().__init__(f"{operation} overflows int32: {value}")
        self.operation = operation
        self.value = value


class ConfigError(Error):
    """Configuration file could not be read or validated."""
