# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for validating definition JSON structures and normalising paths."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from types import MappingProxyType

from .errors import ProjectConfigurationError
from .types import JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as a non-empty string or raise a configuration error.

    Args:
        value: Raw JSON value extracted from the definition payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: The validated string.

    Raises:
        ProjectConfigurationError: If ``value`` is not a non-empty string.
    """
    if not isinstance(value, str) or not value:
        raise ProjectConfigurationError(f"{context}: expected '{key}' to be a non-empty string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string with validation.

    Raises:
        ProjectConfigurationError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ProjectConfigurationError(f"{context}: expected '{key}' to be a string if present")
    return value


def optional_bool(value: JSONValue | None, *, key: str, context: str, default: bool) -> bool:
    """Return ``value`` coerced to ``bool`` falling back to ``default``.

    Raises:
        ProjectConfigurationError: If ``value`` is present but not a boolean.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    raise ProjectConfigurationError(f"{context}: expected '{key}' to be a boolean")


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings with validation.

    Args:
        value: Raw JSON value extracted from the definition payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Tuple containing all string entries from ``value``.

    Raises:
        ProjectConfigurationError: If ``value`` is not a sequence of strings.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise ProjectConfigurationError(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise ProjectConfigurationError(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error.

    Raises:
        ProjectConfigurationError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise ProjectConfigurationError(f"{context}: expected '{key}' to be an object")
    return value


def object_array(value: JSONValue | None, *, key: str, context: str) -> tuple[Mapping[str, JSONValue], ...]:
    """Return ``value`` as a tuple of JSON objects.

    Raises:
        ProjectConfigurationError: If ``value`` is not an array of objects.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise ProjectConfigurationError(f"{context}: expected '{key}' to be an array of objects")
    return tuple(
        expect_mapping(item, key=f"{key}[{index}]", context=context) for index, item in enumerate(value)
    )


def string_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, str]:
    """Return ``value`` as a read-only mapping of strings.

    Args:
        value: Raw JSON value extracted from the definition payload.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        Mapping[str, str]: Immutable mapping with string keys and values.

    Raises:
        ProjectConfigurationError: If ``value`` is not a mapping of strings.
    """
    if value is None:
        return MappingProxyType({})
    if not isinstance(value, Mapping):
        raise ProjectConfigurationError(f"{context}: expected '{key}' to be an object")
    result: dict[str, str] = {}
    for item_key, item_value in value.items():
        if not isinstance(item_key, str) or not isinstance(item_value, str):
            raise ProjectConfigurationError(f"{context}: expected '{key}' to be a mapping of strings")
        result[item_key] = item_value
    return MappingProxyType(result)


def clean_path(value: str) -> str:
    """Rewrite both ``/`` and ``\\`` separators in ``value`` to the host separator.

    Raises:
        ValueError: If ``value`` is ``None``.
    """
    if value is None:
        raise ValueError("value must not be None")
    return value.replace("/", os.sep).replace("\\", os.sep)


def absolute_path(value: str | Path) -> Path:
    """Return ``value`` as an absolute, lexically normalised path without touching the disk."""

    return Path(os.path.abspath(value))


__all__ = [
    "absolute_path",
    "clean_path",
    "expect_mapping",
    "expect_string",
    "object_array",
    "optional_bool",
    "optional_string",
    "string_array",
    "string_mapping",
]
