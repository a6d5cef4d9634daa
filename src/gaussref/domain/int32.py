"""Native signed 32-bit integer semantics.

Python integers never overflow, so the fixed-width behavior of the
reference functions is modelled explicitly here: range checks,
two's-complement wraparound, checked operations, and division that
truncates toward zero.
"""

from __future__ import annotations

from enum import StrEnum

from gaussref.exceptions import ArithmeticOverflowError, InvalidArgumentError

INT32_BITS = 32
INT32_MIN = -(2 ** (INT32_BITS - 1))
INT32_MAX = 2 ** (INT32_BITS - 1) - 1

_MODULUS = 2**INT32_BITS


class OverflowMode(StrEnum):
    """How closed-form intermediates behave outside the int32 range."""

    WIDEN = "widen"
    WRAP = "wrap"
    CHECKED = "checked"


def is_int32(value: int) -> bool:
    """Return True when *value* fits in a signed 32-bit integer."""
    return INT32_MIN <= value <= INT32_MAX


def require_int32(value: object, name: str = "n") -> int:
    """Validate that *value* is an int representable as int32.

    ``bool`` is rejected even though it subclasses ``int``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an int, got {type(value).__name__}"
        raise TypeError(msg)
    if not is_int32(value):
        msg = f"{name}={value} is outside the int32 range [{INT32_MIN}, {INT32_MAX}]"
        raise InvalidArgumentError(msg)
    return value


def wrap_int32(value: int) -> int:
    """Reduce *value* modulo 2**32 into the signed range (two's complement)."""
    value &= _MODULUS - 1
    if value > INT32_MAX:
        value -= _MODULUS
    return value


def checked_int32(value: int, *, operation: str) -> int:
    """Return *value* unchanged, or raise if it does not fit in int32."""
    if not is_int32(value):
        raise ArithmeticOverflowError(operation, value)
    return value


def trunc_div(a: int, b: int) -> int:
    """Integer quotient truncated toward zero, like native signed division.

    Python's ``//`` floors instead, which differs for negative quotients.
    """
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient
