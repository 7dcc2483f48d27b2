# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Registry of every project definition found in a base directory.

The registry owns its :class:`~projectdata.project.Project` instances, keyed
by name, and tracks at most one active project. The active project is
persisted as a marker file in the base directory so it survives restarts.

The registry is not synchronised. When shared across threads, changes to the
active project (and the marker file written with them) must be serialised by
the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TypeVar

from .config import RegistryConfig
from .errors import ProjectConfigurationError
from .hash_list import HashList
from .install_location import RegistryReader
from .io import read_marker, write_marker
from .project import Project
from .scanner import DefinitionScanner
from .schema_repository import SchemaRepository
from .types import EntryObserver, H, Hasher, Normalizer

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class ProjectRegistry:
    """Name-keyed collection of loaded projects with an optional active project."""

    def __init__(self, base_path: Path, *, config: RegistryConfig | None = None) -> None:
        if base_path is None or not str(base_path):
            raise ValueError("base_path must not be empty")
        self._base_path = Path(base_path)
        self._config = config or RegistryConfig(base_path=self._base_path)
        self._projects: dict[str, Project] = {}
        self._active: Project | None = None

    @classmethod
    def load(
        cls,
        base_path: Path | str | None = None,
        current_project: str | None = None,
        *,
        config: RegistryConfig | None = None,
        registry_reader: RegistryReader | None = None,
        schemas: SchemaRepository | None = None,
    ) -> ProjectRegistry:
        """Load every project definition in ``base_path``.

        Args:
            base_path: Directory holding definition files; defaults to the configured base path.
            current_project: Preferred active project name.
            config: Registry configuration; defaults to :meth:`RegistryConfig.from_env`.
            registry_reader: Reader used by registry install actions.
            schemas: Schema repository validating definitions.

        Returns:
            ProjectRegistry: The loaded registry, empty when ``base_path`` does not exist.

        Raises:
            ValueError: If ``base_path`` is given but empty.
            ProjectConfigurationError: If a definition is malformed or two definitions share a name.
        """

        if base_path is not None and not str(base_path):
            raise ValueError("base_path must not be empty")
        settings = config or RegistryConfig.from_env()
        resolved_base = Path(base_path) if base_path is not None else settings.resolved_base_path()
        registry = cls(resolved_base, config=settings)

        scanner = DefinitionScanner(resolved_base, settings.definition_glob)
        for path in scanner.definition_documents():
            project = Project.load(path, registry, registry_reader=registry_reader, schemas=schemas)
            registry._register(project)
        LOGGER.debug("loaded %d project(s) from %s", len(registry._projects), resolved_base)

        preferred = current_project.strip() if current_project else None
        if preferred:
            registry._active = registry._projects.get(preferred)
        elif resolved_base.is_dir():
            marker = read_marker(settings.marker_path(resolved_base))
            if marker:
                registry._active = registry._projects.get(marker)
        if registry._active is not None:
            LOGGER.debug("active project is '%s'", registry._active.name)
        return registry

    def _register(self, project: Project) -> None:
        existing = self._projects.get(project.name)
        if existing is not None:
            raise ProjectConfigurationError(
                f"{project.source}: duplicate project name '{project.name}' (already defined in {existing.source})",
            )
        self._projects[project.name] = project

    @property
    def base_path(self) -> Path:
        return self._base_path

    @property
    def config(self) -> RegistryConfig:
        return self._config

    @property
    def marker_path(self) -> Path:
        """Return the path of the persisted active-project marker."""

        return self._config.marker_path(self._base_path)

    @property
    def active_project(self) -> Project | None:
        return self._active

    @active_project.setter
    def active_project(self, project: Project | None) -> None:
        if project is None:
            self.marker_path.unlink(missing_ok=True)
            self._active = None
            LOGGER.debug("cleared active project")
            return
        if self._projects.get(project.name) is not project:
            raise ValueError(f"project '{project.name}' does not belong to this registry")
        write_marker(self.marker_path, project.name)
        self._active = project
        LOGGER.debug("active project set to '%s'", project.name)

    def set_active(self, name: str | None) -> Project | None:
        """Make the project called ``name`` active, or clear the active project for ``None``.

        Raises:
            KeyError: If no project is called ``name``.
        """

        if name is None:
            self.active_project = None
            return None
        self.active_project = self[name]
        return self._active

    def get(self, name: str) -> Project | None:
        """Return the project called ``name`` or ``None``.

        Raises:
            ValueError: If ``name`` is empty.
        """

        if not name:
            raise ValueError("name must not be empty")
        return self._projects.get(name)

    def try_get_project(self, name: str) -> tuple[bool, Project | None]:
        project = self.get(name)
        return project is not None, project

    def __getitem__(self, name: str) -> Project:
        project = self.get(name)
        if project is None:
            raise KeyError(name)
        return project

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self._projects

    def __iter__(self) -> Iterator[Project]:
        """Iterate over non-hidden projects that have an install path."""

        return (project for project in self._projects.values() if project.available)

    def __len__(self) -> int:
        return len(self._projects)

    def all_projects(self) -> tuple[Project, ...]:
        """Return every loaded project, including hidden and uninstalled ones."""

        return tuple(self._projects.values())

    def get_setting(self, name: str, default: str | None = None) -> str | None:
        """Return the active project's setting ``name`` or ``default`` when none is active."""

        if name is None:
            raise ValueError("name must not be None")
        if self._active is None:
            return default
        return self._active.get_setting(name, default)

    def get_setting_as(self, name: str, default: T) -> T:
        """Return the active project's setting converted to the type of ``default``."""

        if name is None:
            raise ValueError("name must not be None")
        if self._active is None:
            return default
        return self._active.get_setting_as(name, default)

    def load_lists(
        self,
        pattern: str,
        hasher: Hasher[H],
        modifier: Normalizer | None = None,
        extra: EntryObserver[H] | None = None,
    ) -> HashList[H]:
        """Aggregate the active project's lists, or return the shared empty list when none is active."""

        if self._active is None:
            return HashList.empty()
        return self._active.load_lists(pattern, hasher, modifier, extra, encoding=self._config.list_encoding)


__all__ = ["ProjectRegistry"]
