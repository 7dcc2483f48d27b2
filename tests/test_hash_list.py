# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the hash list container."""

from __future__ import annotations

import pytest

from projectdata.hash_list import HashList


def test_add_and_lookup() -> None:
    hash_list: HashList[int] = HashList()
    hash_list.add(1, "one")
    hash_list.add(2, "two")

    assert hash_list.contains(1)
    assert 2 in hash_list
    assert 3 not in hash_list
    assert hash_list.lookup(1) == "one"
    assert hash_list[2] == "two"
    assert hash_list.lookup(3) is None
    assert sorted(hash_list.values()) == ["one", "two"]
    assert len(hash_list) == 2


def test_add_rejects_duplicate_hash() -> None:
    hash_list: HashList[int] = HashList()
    hash_list.add(1, "one")

    with pytest.raises(KeyError):
        hash_list.add(1, "one")


def test_assign_overwrites() -> None:
    hash_list: HashList[str] = HashList()
    hash_list.assign("k", "first")
    hash_list.assign("k", "second")

    assert hash_list.lookup("k") == "second"
    assert len(hash_list) == 1


def test_empty_instance_is_shared_and_read_only() -> None:
    empty: HashList[int] = HashList.empty()

    assert empty is HashList.empty()
    assert empty.read_only
    assert len(empty) == 0
    assert not empty.contains(0)
    assert empty.lookup(0) is None
    assert list(empty.values()) == []
    with pytest.raises(TypeError):
        empty.add(0, "zero")
    with pytest.raises(TypeError):
        empty.assign(0, "zero")


def test_new_lists_are_independent() -> None:
    first: HashList[int] = HashList()
    second: HashList[int] = HashList()
    first.add(1, "one")

    assert 1 not in second
    assert not first.read_only
