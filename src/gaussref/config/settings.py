"""Unified settings — keyword overrides, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides from the caller
  2. Env vars     — ``GAUSSREF_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``gaussref.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the walk-up discovery from :mod:`gaussref.config.discovery`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from gaussref.config.discovery import find_config, read_toml
from gaussref.config.models import EquivalenceConfig, TriangularConfig
from gaussref.exceptions import ConfigError


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``gaussref.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_toml(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class GaussSettings(BaseSettings):
    """Frozen settings consumed by the service layer.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        verbose: DEBUG logging for ``gaussref`` and timing telemetry.
        log_json: JSON log lines instead of the console renderer.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "GAUSSREF_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    verbose: bool = False
    log_json: bool = False

    triangular: TriangularConfig = Field(default_factory=TriangularConfig)
    equivalence: EquivalenceConfig = Field(default_factory=EquivalenceConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> GaussSettings:
        """Build settings, discovering ``gaussref.toml`` from *start* unless
        *config_path* names a file explicitly.
        """
        toml_path: Path | None = None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                msg = f"Config file not found: {toml_path}"
                raise ConfigError(msg)
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **overrides)
        except ValidationError as exc:
            origin = toml_path or "environment or overrides"
            msg = f"Invalid configuration in {origin}: {exc}"
            raise ConfigError(msg) from exc
        finally:
            _tls.toml_path = None
