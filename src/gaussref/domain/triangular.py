"""Triangular numbers, computed two ways.

``gauss_recursive`` is a faithful port of the reference recursion. Its
step adds ``1`` rather than ``n``, so it returns ``n`` itself for every
``n >= 1`` and disagrees with ``gauss_closed_form`` for all ``n > 1``.
That behavior is kept on purpose and pinned by the test suite.
``gauss_summation`` is the corrected accumulation for callers that want
the real triangular number from a non-closed-form method.

INVARIANT: every function here is pure and reads no settings.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from enum import StrEnum

from gaussref.domain.int32 import (
    OverflowMode,
    checked_int32,
    require_int32,
    trunc_div,
    wrap_int32,
)
from gaussref.exceptions import InvalidArgumentError, RecursionDepthError

MAX_RECURSION_DEPTH = 500


class Method(StrEnum):
    """Named implementations, as used by the service layer."""

    RECURSIVE = "recursive"
    ITERATIVE = "iterative"
    CLOSED_FORM = "closed_form"
    SUMMATION = "summation"


def _require_positive(n: object) -> int:
    n = require_int32(n)
    if n < 1:
        msg = f"n must be >= 1 (base case is n == 1), got {n}"
        raise InvalidArgumentError(msg)
    return n


def gauss_recursive(n: int, *, max_depth: int = MAX_RECURSION_DEPTH) -> int:
    """Reference recursion: ``1`` at the base case, ``f(n - 1) + 1`` above it.

    Returns ``n`` for every valid input. Stack depth equals ``n``; inputs
    deeper than *max_depth* are rejected before any frame is pushed.

    Raises:
        InvalidArgumentError: ``n <= 0`` (the reference never terminates).
        RecursionDepthError: ``n > max_depth``.
    """
    n = _require_positive(n)
    if max_depth < 1:
        msg = f"max_depth must be >= 1, got {max_depth}"
        raise InvalidArgumentError(msg)
    if n > max_depth:
        msg = f"n={n} needs {n} stack frames, ceiling is {max_depth}; use gauss_iterative"
        raise RecursionDepthError(msg)
    return _recurse(n)


def _recurse(n: int) -> int:
    if n == 1:
        return 1
    return _recurse(n - 1) + 1


def gauss_iterative(n: int) -> int:
    """Same results as :func:`gauss_recursive`, without stack growth.

    O(n) pure-Python loop: inputs near ``INT32_MAX`` take minutes. Use
    it for sweeps over modest ranges, not as a fast path.
    """
    n = _require_positive(n)
    total = 1
    for _ in range(1, n):
        total += 1
    return total


def gauss_summation(n: int) -> int:
    """Corrected reference: accumulate ``1 + 2 + ... + n`` exactly.

    O(n) like :func:`gauss_iterative`; prefer :func:`gauss_closed_form`
    when only the value is needed.
    """
    n = _require_positive(n)
    total = 0
    for i in range(1, n + 1):
        total += i
    return total


def gauss_closed_form(n: int, *, overflow: OverflowMode | str = OverflowMode.WIDEN) -> int:
    """Compute ``n * (n + 1) / 2`` with division truncating toward zero.

    Defined for every int32 *n*, including zero and negatives.

    Args:
        n: Input value, must fit in int32.
        overflow: ``widen`` keeps exact intermediates (the result may
            exceed int32), ``wrap`` reproduces 32-bit two's-complement
            wraparound, ``checked`` raises once an intermediate overflows.

    Raises:
        ArithmeticOverflowError: ``checked`` mode and ``n + 1`` or the
            product leaves int32. The product first does so at 46341.
    """
    n = require_int32(n)
    mode = OverflowMode(overflow)

    if mode is OverflowMode.WRAP:
        succ = wrap_int32(n + 1)
        product = wrap_int32(n * succ)
    elif mode is OverflowMode.CHECKED:
        succ = checked_int32(n + 1, operation="n + 1")
        product = checked_int32(n * succ, operation="n * (n + 1)")
    else:
        product = n * (n + 1)
    return trunc_div(product, 2)


def resolve(
    method: Method | str,
    *,
    overflow: OverflowMode | str = OverflowMode.WIDEN,
    max_depth: int = MAX_RECURSION_DEPTH,
) -> Callable[[int], int]:
    """Return a one-argument callable for *method* with options bound.

    Raises:
        ValueError: Unknown method name.
    """
    method = Method(method)
    if method is Method.RECURSIVE:
        return functools.partial(gauss_recursive, max_depth=max_depth)
    if method is Method.CLOSED_FORM:
        return functools.partial(gauss_closed_form, overflow=overflow)
    if method is Method.ITERATIVE:
        return gauss_iterative
    return gauss_summation
