"""EquivalenceService — exhaustive agreement sweep between two methods.

The reference and closed-form functions exist to be proven equal. This
service checks every input in a bounded inclusive range and reports
where they differ, rather than assuming they agree.
"""

from __future__ import annotations

import logging

from gaussref.domain.int32 import require_int32
from gaussref.domain.triangular import Method
from gaussref.services.base import DOMAIN_ERRORS, BaseService
from gaussref.services.contracts import EquivalenceReport, dump_validated
from gaussref.services.result import ServiceResult
from gaussref.services.telemetry import get_current_span, traced

logger = logging.getLogger(__name__)


class EquivalenceService(BaseService):
    """Compare two triangular-number methods over a range of inputs."""

    @traced
    def check(
        self,
        start: int | None = None,
        stop: int | None = None,
        *,
        left: Method | str | None = None,
        right: Method | str | None = None,
    ) -> ServiceResult:
        """Evaluate *left* and *right* on every ``n`` in ``[start, stop]``.

        Unset arguments fall back to the ``[equivalence]`` settings.
        At most ``max_counterexamples`` disagreements are kept; the full
        count is always reported in ``mismatches``.
        """
        op = "check_equivalence"
        cfg = self._settings.equivalence
        start = cfg.start if start is None else start
        stop = cfg.stop if stop is None else stop
        requested_left = left or cfg.left
        requested_right = right or cfg.right

        try:
            start = require_int32(start, "start")
            stop = require_int32(stop, "stop")
            left_method = self._parse_method(requested_left)
            right_method = self._parse_method(requested_right)
        except DOMAIN_ERRORS as exc:
            return self._error_result(
                op,
                exc,
                start=repr(start),
                stop=repr(stop),
                left=str(requested_left),
                right=str(requested_right),
            )

        if start > stop:
            return self._failure(
                op,
                "INVALID_RANGE",
                f"start ({start}) must not exceed stop ({stop})",
                start=start,
                stop=stop,
            )

        left_fn = self._method_callable(left_method)
        right_fn = self._method_callable(right_method)
        logger.debug("sweeping %s vs %s over [%d, %d]", left_method, right_method, start, stop)

        counterexamples: list[dict[str, int]] = []
        mismatches = 0
        for n in range(start, stop + 1):
            try:
                a = left_fn(n)
                b = right_fn(n)
            except DOMAIN_ERRORS as exc:
                return self._error_result(
                    op, exc, n=n, left=left_method.value, right=right_method.value
                )
            if a != b:
                mismatches += 1
                if len(counterexamples) < cfg.max_counterexamples:
                    counterexamples.append({"n": n, "left": a, "right": b})

        checked = stop - start + 1
        span = get_current_span()
        if span is not None:
            span.annotate("checked", checked)
            span.annotate("mismatches", mismatches)

        report = {
            "left": left_method,
            "right": right_method,
            "start": start,
            "stop": stop,
            "checked": checked,
            "mismatches": mismatches,
            "equivalent": mismatches == 0,
            "counterexamples": counterexamples,
            "truncated": mismatches > len(counterexamples),
        }
        warnings: list[str] = []
        if mismatches:
            first = counterexamples[0] if counterexamples else None
            hint = f"; first at n={first['n']}" if first else ""
            warnings.append(f"{left_method} and {right_method} disagree on {mismatches} of {checked} inputs{hint}")
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(EquivalenceReport, report),
            warnings=warnings,
        )
