# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for project data."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Final, TypeAlias, TypeVar

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

H = TypeVar("H")

Hasher: TypeAlias = Callable[[str], H]
Normalizer: TypeAlias = Callable[[str], str]
EntryObserver: TypeAlias = Callable[[H, str, str], None]

DEFINITION_GLOB: Final[str] = "*.json"
CURRENT_PROJECT_FILENAME: Final[str] = "current.txt"
DEFAULT_PROJECTS_DIRNAME: Final[str] = "projects"
DEFAULT_LISTS_DIRNAME: Final[str] = "lists"
LIST_COMMENT_PREFIX: Final[str] = ";"
LIST_ENCODING: Final[str] = "utf-8-sig"

__all__ = [
    "CURRENT_PROJECT_FILENAME",
    "DEFAULT_LISTS_DIRNAME",
    "DEFAULT_PROJECTS_DIRNAME",
    "DEFINITION_GLOB",
    "LIST_COMMENT_PREFIX",
    "LIST_ENCODING",
    "EntryObserver",
    "H",
    "Hasher",
    "JSONPrimitive",
    "JSONValue",
    "Normalizer",
]
