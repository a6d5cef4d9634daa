"""gaussref — reference and closed-form triangular numbers.

Two ways to compute ``1 + 2 + ... + n``, plus the tooling to check
whether they agree.
"""

from __future__ import annotations

from gaussref.context import GaussContext
from gaussref.domain.int32 import OverflowMode
from gaussref.domain.triangular import (
    Method,
    gauss_closed_form,
    gauss_iterative,
    gauss_recursive,
    gauss_summation,
)
from gaussref.exceptions import (
    ArithmeticOverflowError,
    ConfigError,
    Error,
    InvalidArgumentError,
    RecursionDepthError,
)

__version__ = "0.1.0"

__all__ = [
    "ArithmeticOverflowError",
    "ConfigError",
    "Error",
    "GaussContext",
    "InvalidArgumentError",
    "Method",
    "OverflowMode",
    "RecursionDepthError",
    "__version__",
    "gauss_closed_form",
    "gauss_iterative",
    "gauss_recursive",
    "gauss_summation",
]
