# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for locating and reading project registries."""

from __future__ import annotations

import codecs
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .types import CURRENT_PROJECT_FILENAME, DEFAULT_PROJECTS_DIRNAME, DEFINITION_GLOB, LIST_ENCODING

ROOT_ENV: Final[str] = "PROJECTDATA_ROOT"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


def default_base_path() -> Path:
    """Return the ``projects`` directory beside the running program.

    Falls back to ``./projects`` when the program location is unknown.
    """

    program = sys.argv[0] if sys.argv else ""
    if not program:
        return Path(DEFAULT_PROJECTS_DIRNAME)
    return Path(program).resolve().parent / DEFAULT_PROJECTS_DIRNAME


class RegistryConfig(BaseModel):
    """Settings controlling where project definitions live and how files are read."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    base_path: Path | None = None
    definition_glob: str = DEFINITION_GLOB
    marker_name: str = CURRENT_PROJECT_FILENAME
    list_encoding: str = LIST_ENCODING

    @field_validator("definition_glob", "marker_name")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("value must not be empty")
        return value

    @field_validator("list_encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding '{value}'") from exc
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides: object) -> RegistryConfig:
        """Build a configuration honouring ``PROJECTDATA_ROOT``.

        Args:
            environ: Environment mapping; defaults to :data:`os.environ`.
            **overrides: Field values taking precedence over the environment.

        Returns:
            RegistryConfig: Validated configuration.

        Raises:
            ConfigError: If any value is invalid.
        """

        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        root = env.get(ROOT_ENV)
        if root:
            values["base_path"] = Path(root).expanduser()
        values.update({key: value for key, value in overrides.items() if value is not None})
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc

    def resolved_base_path(self) -> Path:
        """Return ``base_path`` or the default projects directory."""

        return self.base_path if self.base_path is not None else default_base_path()

    def marker_path(self, base_path: Path) -> Path:
        return base_path / self.marker_name


__all__ = ["ROOT_ENV", "ConfigError", "RegistryConfig", "default_base_path"]
