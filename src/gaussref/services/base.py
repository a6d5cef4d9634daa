"""BaseService — shared foundation for gaussref services.

Every service receives frozen :class:`GaussSettings` at construction.
Domain exceptions are mapped to ``ServiceError`` codes here so all
services report failures the same way.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from gaussref.domain.triangular import Method, resolve
from gaussref.exceptions import (
    ArithmeticOverflowError,
    InvalidArgumentError,
    RecursionDepthError,
)
from gaussref.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from gaussref.config.settings import GaussSettings

logger = logging.getLogger(__name__)

# First match wins; UnknownMethodError is handled before this table.
ERROR_CODES: tuple[tuple[type[Exception], str], ...] = (
    (RecursionDepthError, "RECURSION_LIMIT"),
    # Interpreter stack exhausted below a configured max_depth.
    (RecursionError, "RECURSION_LIMIT"),
    (ArithmeticOverflowError, "OVERFLOW"),
    (InvalidArgumentError, "INVALID_ARGUMENT"),
    (TypeError, "INVALID_TYPE"),
)

# Exceptions a domain call may raise on bad input.
DOMAIN_ERRORS: tuple[type[Exception], ...] = tuple(exc_type for exc_type, _ in ERROR_CODES)


class UnknownMethodError(InvalidArgumentError):
    """Method name not in :class:`Method`."""


class BaseService:
    """Base for service-layer classes.

    Usage::

        class TriangularService(BaseService):
            def compute(self, n: int) -> ServiceResult:
                fn = self._method_callable(self._parse_method(...))
                ...
    """

    def __init__(self, settings: GaussSettings) -> None:
        self._settings = settings

    @staticmethod
    def _parse_method(name: Method | str) -> Method:
        try:
            return Method(name)
        except ValueError as exc:
            choices = ", ".join(m.value for m in Method)
            msg = f"Unknown method {name!r}. Choose from: {choices}"
            raise UnknownMethodError(msg) from exc

    def _method_callable(self, method: Method) -> Callable[[int], int]:
        """Bind configured overflow mode and recursion ceiling to *method*."""
        cfg = self._settings.triangular
        return resolve(method, overflow=cfg.overflow, max_depth=cfg.max_depth)

    @staticmethod
    def _failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.warning("%s failed [%s]: %s", op, code, message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @classmethod
    def _error_result(cls, op: str, exc: Exception, **detail: Any) -> ServiceResult:
        """Convert a domain exception into a failed ServiceResult."""
        if isinstance(exc, UnknownMethodError):
            code = "UNKNOWN_METHOD"
        else:
            code = next(c for exc_type, c in ERROR_CODES if isinstance(exc, exc_type))
        return cls._failure(op, code, str(exc), **detail)
