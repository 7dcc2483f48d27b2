# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Named hash functions and line normalisers for list aggregation."""

from __future__ import annotations

import zlib
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Final, TypeVar

_FNV32_OFFSET: Final[int] = 0x811C9DC5
_FNV32_PRIME: Final[int] = 0x01000193
_FNV64_OFFSET: Final[int] = 0xCBF29CE484222325
_FNV64_PRIME: Final[int] = 0x100000001B3
_MASK32: Final[int] = 0xFFFFFFFF
_MASK64: Final[int] = 0xFFFFFFFFFFFFFFFF

T = TypeVar("T")


def fnv1a32(value: str) -> int:
    """Return the 32-bit FNV-1a hash of ``value`` encoded as UTF-8."""

    result = _FNV32_OFFSET
    for byte in value.encode("utf-8"):
        result = ((result ^ byte) * _FNV32_PRIME) & _MASK32
    return result


def fnv1a64(value: str) -> int:
    """Return the 64-bit FNV-1a hash of ``value`` encoded as UTF-8."""

    result = _FNV64_OFFSET
    for byte in value.encode("utf-8"):
        result = ((result ^ byte) * _FNV64_PRIME) & _MASK64
    return result


def crc32(value: str) -> int:
    """Return the CRC-32 of ``value`` encoded as UTF-8."""

    return zlib.crc32(value.encode("utf-8")) & _MASK32


def identity(value: str) -> str:
    return value


def backslash(value: str) -> str:
    """Rewrite forward slashes to backslashes."""

    return value.replace("/", "\\")


HASHERS: Final[Mapping[str, Callable[[str], object]]] = MappingProxyType(
    {
        "crc32": crc32,
        "fnv1a32": fnv1a32,
        "fnv1a64": fnv1a64,
        "identity": identity,
    },
)

NORMALIZERS: Final[Mapping[str, Callable[[str], str]]] = MappingProxyType(
    {
        "backslash": backslash,
        "lower": str.lower,
        "upper": str.upper,
    },
)


def get_hasher(name: str) -> Callable[[str], object]:
    """Return the hash function registered as ``name``.

    Raises:
        KeyError: If ``name`` is unknown; the message lists available names.
    """

    return _lookup(HASHERS, name, kind="hasher")


def get_normalizer(name: str) -> Callable[[str], str]:
    """Return the normaliser registered as ``name``.

    Raises:
        KeyError: If ``name`` is unknown; the message lists available names.
    """

    return _lookup(NORMALIZERS, name, kind="normalizer")


def _lookup(table: Mapping[str, T], name: str, *, kind: str) -> T:
    try:
        return table[name.lower()]
    except KeyError as exc:
        available = ", ".join(sorted(table))
        raise KeyError(f"unknown {kind} '{name}' (available: {available})") from exc


__all__ = [
    "HASHERS",
    "NORMALIZERS",
    "backslash",
    "crc32",
    "fnv1a32",
    "fnv1a64",
    "get_hasher",
    "get_normalizer",
    "identity",
]
