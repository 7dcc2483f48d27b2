# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by project data operations."""

from __future__ import annotations

from pathlib import Path


class ProjectDataError(RuntimeError):
    """Base class for errors surfaced by the project data layer."""


class ProjectConfigurationError(ProjectDataError):
    """Raised when project definitions are malformed or inconsistent."""


class ProjectValidationError(ProjectConfigurationError):
    """Raised when a project definition fails structural schema validation."""


class HashCollisionError(ProjectDataError):
    """Raised when two distinct list entries produce the same hash."""

    def __init__(
        self,
        *,
        source: str,
        existing: str,
        hash_value: object,
        path: Path | None = None,
    ) -> None:
        """Create the collision error naming both conflicting strings.

        Args:
            source: String currently being added to the hash list.
            existing: String already stored under ``hash_value``.
            hash_value: Hash shared by both strings.
            path: List file containing ``source`` when known.
        """

        message = f"hash collision ('{source}' vs '{existing}')"
        if path is not None:
            message = f"{path}: {message}"
        super().__init__(message)
        self.source = source
        self.existing = existing
        self.hash_value = hash_value
        self.path = path


class SettingValueError(ProjectDataError, ValueError):
    """Raised when a project setting cannot be converted to the requested type."""


__all__ = (
    "HashCollisionError",
    "ProjectConfigurationError",
    "ProjectDataError",
    "ProjectValidationError",
    "SettingValueError",
)
