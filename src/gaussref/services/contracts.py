"""Typed payload contracts for service results.

Payloads are validated before they leave the service layer so key
regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel

from gaussref.domain.int32 import OverflowMode
from gaussref.domain.triangular import Method

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="json")


class ComputeResultData(BaseModel):
    """Payload contract for ``TriangularService.compute``."""

    n: int
    method: Method
    value: int
    overflow: OverflowMode | None = None


class Counterexample(BaseModel):
    """One input on which the two methods disagree."""

    n: int
    left: int
    right: int


class EquivalenceReport(BaseModel):
    """Payload contract for ``EquivalenceService.check``."""

    left: Method
    right: Method
    start: int
    stop: int
    checked: int
    mismatches: int
    equivalent: bool
    counterexamples: list[Counterexample]
    truncated: bool
