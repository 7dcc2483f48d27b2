# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Loaded projects: resolved paths, settings and list aggregation."""

from __future__ import annotations

import logging
import weakref
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from .aggregator import load_lists
from .errors import SettingValueError
from .hash_list import HashList
from .install_location import RegistryReader, resolve_install_path
from .model_project import ProjectDefinition
from .schema_repository import SchemaRepository
from .types import DEFAULT_LISTS_DIRNAME, LIST_ENCODING, EntryObserver, H, Hasher, Normalizer
from .utils import absolute_path, clean_path

if TYPE_CHECKING:
    from .registry import ProjectRegistry

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

_TRUE_STRINGS = frozenset({"true"})
_FALSE_STRINGS = frozenset({"false"})


@dataclass(frozen=True, slots=True, eq=False)
class Project:
    """A configured game or title with its install and list directories.

    Projects are immutable once loaded. The owning registry is held through a
    weak reference and is only used to look dependencies up by name.
    """

    name: str
    hidden: bool
    install_path: Path | None
    lists_path: Path
    settings: Mapping[str, str]
    dependencies: tuple[str, ...]
    source: Path | None = None
    _registry: weakref.ReferenceType[ProjectRegistry] | None = field(default=None, repr=False, compare=False)

    @classmethod
    def load(
        cls,
        path: Path,
        registry: ProjectRegistry | None = None,
        *,
        registry_reader: RegistryReader | None = None,
        schemas: SchemaRepository | None = None,
    ) -> Project:
        """Load the definition at ``path`` and resolve its paths.

        Args:
            path: Definition file to load.
            registry: Registry that will own the project.
            registry_reader: Reader used by registry install actions.
            schemas: Schema repository validating the definition.

        Returns:
            Project: The loaded project; ``install_path`` is ``None`` when no chain resolves.

        Raises:
            ValueError: If ``path`` is empty.
            ProjectConfigurationError: If the definition is malformed.
        """

        if path is None or not str(path):
            raise ValueError("path must not be empty")
        path = absolute_path(path)
        definition = ProjectDefinition.load(path, schemas=schemas)
        return cls.from_definition(definition, registry, registry_reader=registry_reader)

    @classmethod
    def from_definition(
        cls,
        definition: ProjectDefinition,
        registry: ProjectRegistry | None = None,
        *,
        registry_reader: RegistryReader | None = None,
    ) -> Project:
        """Build a project from an already parsed ``definition``."""

        parent_path = definition.source.parent
        install_path = resolve_install_path(parent_path, definition.install_locations, registry=registry_reader)
        if install_path is None:
            LOGGER.debug("project '%s' has no install path", definition.name)
        else:
            LOGGER.debug("project '%s' installed at %s", definition.name, install_path)
        return cls(
            name=definition.name,
            hidden=definition.hidden,
            install_path=install_path,
            lists_path=_lists_path(parent_path, definition),
            settings=definition.settings,
            dependencies=definition.dependencies,
            source=definition.source,
            _registry=weakref.ref(registry) if registry is not None else None,
        )

    @property
    def registry(self) -> ProjectRegistry | None:
        """Return the owning registry while it is alive."""

        return self._registry() if self._registry is not None else None

    @property
    def available(self) -> bool:
        """Return ``True`` when the project is visible in default enumeration."""

        return not self.hidden and self.install_path is not None

    def __str__(self) -> str:
        return self.name

    def dependency_projects(self) -> tuple[Project, ...]:
        """Return the declared dependencies known to the owning registry, in declaration order."""

        registry = self.registry
        if registry is None:
            return ()
        resolved: list[Project] = []
        for name in self.dependencies:
            dependency = registry.get(name) if name else None
            if dependency is None:
                LOGGER.debug("project '%s' dependency '%s' is not loaded, skipping", self.name, name)
                continue
            resolved.append(dependency)
        return tuple(resolved)

    def get_setting(self, name: str, default: str | None = None) -> str | None:
        """Return the string setting ``name`` or ``default`` when absent.

        Raises:
            ValueError: If ``name`` is empty.
        """

        if not name:
            raise ValueError("name must not be empty")
        return self.settings.get(name, default)

    def get_setting_as(self, name: str, default: T) -> T:
        """Return the setting ``name`` converted to the type of ``default``.

        Enumerations are matched by member name, then by value. Booleans accept
        ``true`` and ``false`` in any case.

        Raises:
            ValueError: If ``name`` is empty.
            SettingValueError: If the stored value cannot be converted.
        """

        if not name:
            raise ValueError("name must not be empty")
        raw = self.settings.get(name)
        if raw is None:
            return default
        return _convert_setting(raw, default, name=name, project=self.name)

    def load_lists(
        self,
        pattern: str,
        hasher: Hasher[H],
        modifier: Normalizer | None = None,
        extra: EntryObserver[H] | None = None,
        *,
        encoding: str = LIST_ENCODING,
    ) -> HashList[H]:
        """Aggregate the lists of this project's dependencies and its own lists.

        See :func:`projectdata.aggregator.load_lists`.
        """

        return load_lists(self, pattern, hasher, modifier, extra, encoding=encoding)


def _lists_path(parent_path: Path, definition: ProjectDefinition) -> Path:
    if not definition.list_location:
        return parent_path / DEFAULT_LISTS_DIRNAME / definition.name
    location = Path(clean_path(definition.list_location))
    if location.is_absolute():
        return absolute_path(location)
    return absolute_path(parent_path / location)


def _convert_setting(raw: str, default: T, *, name: str, project: str) -> T:
    target = type(default)
    context = f"project '{project}' setting '{name}'"
    if isinstance(default, Enum):
        members = target.__members__
        if raw in members:
            return members[raw]
        for member in members.values():
            if str(member.value) == raw:
                return member
        raise SettingValueError(f"{context}: bad enum value '{raw}'")
    if isinstance(default, bool):
        lowered = raw.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True  # type: ignore[return-value]
        if lowered in _FALSE_STRINGS:
            return False  # type: ignore[return-value]
        raise SettingValueError(f"{context}: expected a boolean, got '{raw}'")
    try:
        return target(raw.strip() if target in (int, float) else raw)
    except (TypeError, ValueError) as exc:
        raise SettingValueError(f"{context}: cannot convert '{raw}' to {target.__name__}") from exc


__all__ = ["Project"]
