# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for registry configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from projectdata.config import ROOT_ENV, ConfigError, RegistryConfig, default_base_path
from projectdata.registry import ProjectRegistry


def test_defaults() -> None:
    config = RegistryConfig.from_env({})

    assert config.base_path is None
    assert config.definition_glob == "*.json"
    assert config.marker_name == "current.txt"
    assert config.resolved_base_path() == default_base_path()
    assert default_base_path().name == "projects"


def test_environment_supplies_base_path(tmp_path: Path) -> None:
    config = RegistryConfig.from_env({ROOT_ENV: str(tmp_path)})

    assert config.resolved_base_path() == tmp_path


def test_overrides_beat_environment(tmp_path: Path) -> None:
    override = tmp_path / "override"
    config = RegistryConfig.from_env({ROOT_ENV: str(tmp_path)}, base_path=override, marker_name=None)

    assert config.base_path == override
    assert config.marker_name == "current.txt"


@pytest.mark.parametrize(
    "overrides",
    [{"list_encoding": "no-such-codec"}, {"marker_name": "  "}, {"unknown": 1}],
)
def test_invalid_values_raise_config_error(overrides: dict[str, object]) -> None:
    with pytest.raises(ConfigError):
        RegistryConfig.from_env({}, **overrides)


def test_load_uses_environment_root(projects_root: Path, write_definition, monkeypatch: pytest.MonkeyPatch) -> None:
    write_definition("game", {"name": "game"})
    monkeypatch.setenv(ROOT_ENV, str(projects_root))

    registry = ProjectRegistry.load()

    assert registry.base_path == projects_root
    assert "game" in registry


def test_custom_marker_and_glob(projects_root: Path, write_definition) -> None:
    write_definition("game", {"name": "game"})
    (projects_root / "other.project").write_text('{"name": "other"}', encoding="utf-8")
    config = RegistryConfig(base_path=projects_root, definition_glob="*.project", marker_name="active.txt")

    registry = ProjectRegistry.load(config=config)
    registry.set_active("other")

    assert [project.name for project in registry.all_projects()] == ["other"]
    assert (projects_root / "active.txt").read_text(encoding="utf-8") == "other"
