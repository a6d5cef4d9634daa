"""TriangularService — evaluate a single method on a single input."""

from __future__ import annotations

import logging

from gaussref.domain.int32 import OverflowMode, is_int32
from gaussref.domain.triangular import Method
from gaussref.services.base import DOMAIN_ERRORS, BaseService
from gaussref.services.contracts import ComputeResultData, dump_validated
from gaussref.services.result import ServiceResult
from gaussref.services.telemetry import traced

logger = logging.getLogger(__name__)


class TriangularService(BaseService):
    """Compute triangular numbers with the configured method and overflow mode."""

    @traced
    def compute(self, n: int, method: Method | str | None = None) -> ServiceResult:
        """Evaluate *method* (default ``[triangular] method``) at *n*."""
        op = "compute"
        cfg = self._settings.triangular
        requested = method or cfg.method
        try:
            chosen = self._parse_method(requested)
            value = self._method_callable(chosen)(n)
        except DOMAIN_ERRORS as exc:
            return self._error_result(op, exc, n=repr(n), method=str(requested))

        warnings: list[str] = []
        payload: dict[str, object] = {"n": n, "method": chosen, "value": value}
        if chosen is Method.CLOSED_FORM:
            payload["overflow"] = cfg.overflow
            if cfg.overflow is OverflowMode.WIDEN and not is_int32(value):
                warnings.append(f"Result {value} exceeds int32; computed with widened arithmetic")

        logger.debug("compute %s(%d) = %d", chosen, n, value)
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(ComputeResultData, payload),
            warnings=warnings,
        )
