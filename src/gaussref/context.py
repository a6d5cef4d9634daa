"""GaussContext — one-stop wiring for library callers.

Loads settings, configures logging once, turns on telemetry when
verbose, and hands out services bound to the same settings. Services
are created lazily so building a context never does more work than
the caller asks for.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from gaussref.config.logging import configure_logging
from gaussref.config.settings import GaussSettings
from gaussref.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from gaussref.services.equivalence import EquivalenceService
    from gaussref.services.triangular import TriangularService


class GaussContext:
    """Shared settings plus lazily created services.

    Usage::

        ctx = GaussContext.load(verbose=True)
        ctx.equivalence.check(1, 100)
    """

    def __init__(self, settings: GaussSettings) -> None:
        self.settings = settings
        self._triangular: TriangularService | None = None
        self._equivalence: EquivalenceService | None = None

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)
        if settings.verbose:
            enable_telemetry()

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> GaussContext:
        """Build settings via :meth:`GaussSettings.load` and wrap them."""
        return cls(GaussSettings.load(config_path=config_path, start=start, **overrides))

    @property
    def triangular(self) -> TriangularService:
        if self._triangular is None:
            from gaussref.services.triangular import TriangularService

            self._triangular = TriangularService(self.settings)
        return self._triangular

    @property
    def equivalence(self) -> EquivalenceService:
        if self._equivalence is None:
            from gaussref.services.equivalence import EquivalenceService

            self._equivalence = EquivalenceService(self.settings)
        return self._equivalence
