"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, gaussref.toml only holds
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, model_validator

from gaussref.domain.int32 import OverflowMode
from gaussref.domain.triangular import MAX_RECURSION_DEPTH, Method


class TriangularConfig(BaseModel):
    """[triangular] section."""

    model_config = {"frozen": True}

    method: Method = Method.RECURSIVE
    overflow: OverflowMode = OverflowMode.WIDEN
    max_depth: int = Field(default=MAX_RECURSION_DEPTH, ge=1)


class EquivalenceConfig(BaseModel):
    """[equivalence] section — default sweep for ``check_equivalence``."""

    model_config = {"frozen": True}

    start: int = 1
    stop: int = MAX_RECURSION_DEPTH
    left: Method = Method.RECURSIVE
    right: Method = Method.CLOSED_FORM
    max_counterexamples: int = Field(default=10, ge=0)

    @model_validator(mode="after")
    def _check_range(self) -> Self:
        if self.start > self.stop:
            msg = f"equivalence.start ({self.start}) must not exceed equivalence.stop ({self.stop})"
            raise ValueError(msg)
        return self


class GaussConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    triangular: TriangularConfig = Field(default_factory=TriangularConfig)
    equivalence: EquivalenceConfig = Field(default_factory=EquivalenceConfig)
