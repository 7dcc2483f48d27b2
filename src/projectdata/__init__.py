# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Project metadata resolution for game asset tooling.

Loads per-title project definitions, locates install directories and merges
hash lists across declared dependencies.
"""

from __future__ import annotations

from typing import Final

from .aggregator import load_lists
from .config import ConfigError, RegistryConfig
from .errors import (
    HashCollisionError,
    ProjectConfigurationError,
    ProjectDataError,
    ProjectValidationError,
    SettingValueError,
)
from .hash_list import HashList
from .install_location import RegistryReader, WindowsRegistry, resolve_install_path
from .model_install import InstallAction, InstallActionKind, InstallLocation, RegistryView
from .model_project import ProjectDefinition
from .project import Project
from .registry import ProjectRegistry

__all__: Final[tuple[str, ...]] = (
    "ConfigError",
    "HashCollisionError",
    "HashList",
    "InstallAction",
    "InstallActionKind",
    "InstallLocation",
    "Project",
    "ProjectConfigurationError",
    "ProjectDataError",
    "ProjectDefinition",
    "ProjectRegistry",
    "ProjectValidationError",
    "RegistryConfig",
    "RegistryReader",
    "RegistryView",
    "SettingValueError",
    "WindowsRegistry",
    "load_lists",
    "resolve_install_path",
)
