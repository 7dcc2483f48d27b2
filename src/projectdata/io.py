# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading project definition documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from pathlib import Path
from typing import cast

from .errors import ProjectConfigurationError
from .types import JSONValue


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        ProjectConfigurationError: If the schema cannot be parsed or is not a JSON object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise ProjectConfigurationError(f"{path}: failed to parse JSON schema") from exc
    return _ensure_json_object(payload, context=str(path))


def load_document(path: Path) -> Mapping[str, JSONValue]:
    """Load a project definition document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON object.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        ProjectConfigurationError: If the document is not valid JSON or not an object.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8-sig") as stream:
        try:
            payload = cast(JSONValue, json.load(stream))
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ProjectConfigurationError(f"{path}: failed to parse project definition: {exc}") from exc
    return _ensure_json_object(payload, context=str(path))


def iter_list_lines(path: Path, *, encoding: str) -> Iterator[str]:
    """Yield the lines of a list file without their line terminators.

    Undecodable bytes are replaced with U+FFFD rather than aborting the read.

    Args:
        path: List file to read.
        encoding: Text encoding used to decode the file.

    Returns:
        Iterator[str]: Lines of ``path`` in file order.
    """
    with path.open("r", encoding=encoding, errors="replace", newline=None) as stream:
        for line in stream:
            yield line.rstrip("\r\n")


def write_marker(path: Path, value: str) -> None:
    """Persist ``value`` as the sole content of the marker file at ``path``."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(value, encoding="utf-8")


def read_marker(path: Path) -> str | None:
    """Return the trimmed marker contents, or ``None`` when no marker exists."""

    if not path.is_file():
        return None
    return path.read_text(encoding="utf-8-sig").strip()


def _ensure_json_object(value: JSONValue, *, context: str) -> Mapping[str, JSONValue]:
    """Ensure ``value`` is a JSON object, raising on type mismatch.

    Args:
        value: Parsed JSON payload to validate.
        context: Human-readable context string used in error messages.

    Returns:
        Mapping[str, JSONValue]: Validated JSON object.

    Raises:
        ProjectConfigurationError: If ``value`` is not a mapping.
    """

    mapping = _ensure_json_value(value, context=context)
    if not isinstance(mapping, Mapping):
        raise ProjectConfigurationError(f"{context}: expected a JSON object")
    return mapping


def _ensure_json_value(value: JSONValue, *, context: str) -> JSONValue:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Mapping):
        return {str(key): _ensure_json_value(item, context=f"{context}.{key}") for key, item in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_ensure_json_value(item, context=f"{context}[]") for item in value]
    raise ProjectConfigurationError(f"{context}: value is not valid JSON")


__all__ = ["iter_list_lines", "load_document", "load_schema", "read_marker", "write_marker"]
