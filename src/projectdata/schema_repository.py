# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating project definition documents."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from typing import Final, Protocol, cast, runtime_checkable

from .errors import ProjectValidationError
from .io import load_schema
from .types import JSONValue

PROJECT_SCHEMA_FILENAME: Final[str] = "project_definition.schema.json"
DEFAULT_SCHEMA_ROOT: Final[Path] = Path(__file__).resolve().parent / "schema"


class SchemaValidationError(Protocol):
    """Represent schema validation errors surfaced by jsonschema."""

    @property
    def message(self) -> str:
        """Return the descriptive validation error message."""

    @property
    def json_path(self) -> str:
        """Return the JSON path of the offending element."""


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def validate(self, instance: JSONValue) -> None:
        """Validate ``instance`` against the bound schema."""

    def iter_errors(self, instance: JSONValue) -> Iterable[SchemaValidationError]:
        """Iterate over validation errors for ``instance``."""


SchemaValidatorFactory = Callable[[JSONValue], SchemaValidator]

jsonschema_module = importlib.import_module("jsonschema")
Draft202012Validator = cast(SchemaValidatorFactory, jsonschema_module.Draft202012Validator)


@dataclass(slots=True)
class SchemaRepository:
    """Hold the validator used for project definition documents."""

    schema_root: Path
    project_validator: SchemaValidator

    @classmethod
    def load(cls, schema_root: Path | None = None) -> SchemaRepository:
        """Load schema validators from disk.

        Args:
            schema_root: Optional override for the schema directory.

        Returns:
            SchemaRepository: Repository configured with the project validator.
        """
        resolved_root = schema_root or DEFAULT_SCHEMA_ROOT
        project_schema = load_schema(resolved_root / PROJECT_SCHEMA_FILENAME)
        return cls(
            schema_root=resolved_root,
            project_validator=Draft202012Validator(project_schema),
        )

    def validate_project(self, document: Mapping[str, JSONValue], *, path: Path) -> None:
        """Validate a project definition document.

        Args:
            document: Parsed JSON payload.
            path: Filesystem path used in error reporting.

        Raises:
            ProjectValidationError: When the document fails schema validation.
        """

        errors = sorted(
            self.project_validator.iter_errors(document),
            key=lambda error: error.json_path,
        )
        if not errors:
            return
        details = "; ".join(f"{error.json_path}: {error.message}" for error in errors)
        raise ProjectValidationError(f"{path}: {details}")


@cache
def default_schema_repository() -> SchemaRepository:
    """Return the process-wide repository built from the bundled schema."""

    return SchemaRepository.load()


__all__ = [
    "DEFAULT_SCHEMA_ROOT",
    "SchemaRepository",
    "SchemaValidator",
    "default_schema_repository",
]
