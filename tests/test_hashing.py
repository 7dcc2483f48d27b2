# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the named hash functions and normalisers."""

from __future__ import annotations

import pytest

from projectdata.hashing import crc32, fnv1a32, fnv1a64, get_hasher, get_normalizer, identity


def test_fnv1a32_reference_values() -> None:
    assert fnv1a32("") == 0x811C9DC5
    assert fnv1a32("a") == 0xE40C292C


def test_fnv1a64_reference_values() -> None:
    assert fnv1a64("") == 0xCBF29CE484222325
    assert fnv1a64("a") == 0xAF63DC4C8601EC8C


def test_crc32_reference_value() -> None:
    assert crc32("123456789") == 0xCBF43926


def test_lookup_by_name() -> None:
    assert get_hasher("FNV1A32") is fnv1a32
    assert get_hasher("identity") is identity
    assert get_normalizer("lower")("Assets/TEX.bin") == "assets/tex.bin"
    assert get_normalizer("backslash")("a/b/c") == "a\\b\\c"


def test_unknown_names_list_available_choices() -> None:
    with pytest.raises(KeyError, match="available: crc32"):
        get_hasher("md5")
    with pytest.raises(KeyError, match="unknown normalizer"):
        get_normalizer("title")
