# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Project definition model parsed from a definition document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .io import load_document
from .model_install import InstallLocation, install_locations_array
from .schema_repository import SchemaRepository, default_schema_repository
from .types import JSONValue
from .utils import expect_string, optional_bool, optional_string, string_array, string_mapping


@dataclass(frozen=True, slots=True)
class ProjectDefinition:
    """Validated contents of a single project definition file."""

    name: str
    list_location: str | None
    hidden: bool
    dependencies: tuple[str, ...]
    settings: Mapping[str, str]
    install_locations: tuple[InstallLocation, ...]
    source: Path

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, source: Path) -> ProjectDefinition:
        """Create a ``ProjectDefinition`` from a schema-validated mapping.

        Args:
            data: Parsed definition document.
            source: File the document was read from.

        Returns:
            ProjectDefinition: Frozen definition.
        """

        context = str(source)
        return ProjectDefinition(
            name=expect_string(data.get("name"), key="name", context=context),
            list_location=optional_string(data.get("list_location"), key="list_location", context=context),
            hidden=optional_bool(data.get("hidden"), key="hidden", context=context, default=False),
            dependencies=string_array(data.get("dependencies"), key="dependencies", context=context),
            settings=string_mapping(data.get("settings"), key="settings", context=context),
            install_locations=install_locations_array(
                data.get("install_locations"),
                key="install_locations",
                context=context,
            ),
            source=source,
        )

    @classmethod
    def load(cls, path: Path, *, schemas: SchemaRepository | None = None) -> ProjectDefinition:
        """Read, validate and parse the definition document at ``path``.

        Raises:
            ProjectConfigurationError: If the document is not valid JSON.
            ProjectValidationError: If the document violates the definition schema.
        """

        document = load_document(path)
        (schemas or default_schema_repository()).validate_project(document, path=path)
        return cls.from_mapping(document, source=path)


__all__ = ["ProjectDefinition"]
