# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for string and structured project settings."""

from __future__ import annotations

from enum import Enum, IntEnum
from pathlib import Path

import pytest

from projectdata.errors import SettingValueError
from projectdata.registry import ProjectRegistry


class Endian(Enum):
    LITTLE = "little"
    BIG = "big"


class Version(IntEnum):
    V1 = 1
    V2 = 2


@pytest.fixture
def registry(projects_root: Path, write_definition) -> ProjectRegistry:
    write_definition(
        "game",
        {
            "name": "game",
            "settings": {
                "endian": "BIG",
                "endian_value": "little",
                "version": "2",
                "compressed": "True",
                "alignment": " 16 ",
                "scale": "0.5",
                "archive": "data/archive.bin",
                "broken_bool": "maybe",
                "broken_int": "sixteen",
                "broken_enum": "middle",
            },
        },
    )
    return ProjectRegistry.load(projects_root, "game")


def test_string_settings(registry: ProjectRegistry) -> None:
    project = registry["game"]

    assert project.get_setting("archive") == "data/archive.bin"
    assert project.get_setting("missing", "fallback") == "fallback"
    assert project.get_setting("missing") is None
    assert registry.get_setting("archive", "x") == "data/archive.bin"
    assert registry.get_setting("missing", "x") == "x"


def test_structured_settings(registry: ProjectRegistry) -> None:
    assert registry.get_setting_as("endian", Endian.LITTLE) is Endian.BIG
    assert registry.get_setting_as("endian_value", Endian.BIG) is Endian.LITTLE
    assert registry.get_setting_as("version", Version.V1) is Version.V2
    assert registry.get_setting_as("compressed", False) is True
    assert registry.get_setting_as("alignment", 4) == 16
    assert registry.get_setting_as("scale", 1.0) == 0.5
    assert registry.get_setting_as("archive", Path()) == Path("data/archive.bin")
    assert registry.get_setting_as("missing", 7) == 7


@pytest.mark.parametrize(
    ("name", "default"),
    [("broken_bool", True), ("broken_int", 0), ("broken_enum", Endian.LITTLE)],
)
def test_unconvertible_settings_raise(registry: ProjectRegistry, name: str, default: object) -> None:
    with pytest.raises(SettingValueError, match=name):
        registry.get_setting_as(name, default)


def test_empty_setting_name_is_rejected(registry: ProjectRegistry) -> None:
    with pytest.raises(ValueError):
        registry["game"].get_setting("")
    with pytest.raises(ValueError):
        registry["game"].get_setting_as("", 1)


def test_no_active_project_returns_defaults(projects_root: Path, write_definition) -> None:
    write_definition("game", {"name": "game", "settings": {"key": "value"}})
    registry = ProjectRegistry.load(projects_root)

    assert registry.active_project is None
    assert registry.get_setting("key", "default") == "default"
    assert registry.get_setting_as("key", Endian.BIG) is Endian.BIG


def test_settings_are_read_only(registry: ProjectRegistry) -> None:
    with pytest.raises(TypeError):
        registry["game"].settings["archive"] = "other"  # type: ignore[index]
