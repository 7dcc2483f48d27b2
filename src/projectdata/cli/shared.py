# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, registry loading)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from ..config import ConfigError, RegistryConfig
from ..errors import ProjectDataError
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn
from ..registry import ProjectRegistry


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    use_emoji: bool

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji)

    def info(self, message: str) -> None:
        core_info(message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        core_ok(message, use_emoji=self.use_emoji)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool) -> CLILogger:
    """Return a :class:`CLILogger` honouring the ``emoji`` preference."""

    return CLILogger(use_emoji=emoji)


def load_registry(root: Path | None, *, current_project: str | None = None) -> ProjectRegistry:
    """Load the registry rooted at ``root`` translating library failures into :class:`CLIError`.

    Args:
        root: Base directory override; ``None`` uses the configured default.
        current_project: Preferred active project name.

    Returns:
        ProjectRegistry: Loaded registry.

    Raises:
        CLIError: If configuration or definitions are invalid, or ``current_project`` is unknown.
    """

    try:
        config = RegistryConfig.from_env(base_path=root)
        registry = ProjectRegistry.load(config.resolved_base_path(), current_project, config=config)
    except (ConfigError, ProjectDataError) as exc:
        raise CLIError(str(exc)) from exc
    if current_project and registry.active_project is None:
        raise CLIError(f"unknown project '{current_project}'")
    return registry


def exit_with(logger: CLILogger, exc: CLIError) -> typer.Exit:
    """Report ``exc`` through ``logger`` and return the matching :class:`typer.Exit`."""

    logger.fail(str(exc))
    return typer.Exit(code=exc.exit_code)


__all__ = ["CLIError", "CLILogger", "build_cli_logger", "exit_with", "load_registry"]
