# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for loading project registries and tracking the active project."""

from __future__ import annotations

import gc
from pathlib import Path

import pytest

from projectdata.errors import ProjectConfigurationError
from projectdata.hash_list import HashList
from projectdata.hashing import identity
from projectdata.registry import ProjectRegistry


@pytest.fixture
def populated_root(projects_root: Path, write_definition, tmp_path: Path) -> Path:
    install = tmp_path / "install"
    install.mkdir()
    installed = [{"actions": [{"type": "path", "value": str(install)}]}]
    write_definition("alpha", {"name": "alpha", "install_locations": installed})
    write_definition("beta", {"name": "beta", "install_locations": installed, "dependencies": ["alpha"]})
    write_definition("hidden", {"name": "hidden-base", "hidden": True, "install_locations": installed})
    write_definition("uninstalled", {"name": "uninstalled"})
    return projects_root


def test_missing_base_directory_yields_empty_registry(tmp_path: Path) -> None:
    registry = ProjectRegistry.load(tmp_path / "nowhere")

    assert len(registry) == 0
    assert list(registry) == []
    assert registry.active_project is None
    assert registry.get_setting("anything", "fallback") == "fallback"
    assert registry.load_lists("*.txt", identity) is HashList.empty()


def test_enumeration_skips_hidden_and_uninstalled(populated_root: Path) -> None:
    registry = ProjectRegistry.load(populated_root)

    assert sorted(project.name for project in registry) == ["alpha", "beta"]
    assert len(registry) == 4
    assert sorted(project.name for project in registry.all_projects()) == [
        "alpha",
        "beta",
        "hidden-base",
        "uninstalled",
    ]
    assert registry["hidden-base"].hidden
    assert registry["uninstalled"].install_path is None
    assert "uninstalled" in registry


def test_uninstalled_project_is_still_a_dependency(populated_root: Path, write_definition) -> None:
    write_definition("consumer", {"name": "consumer", "dependencies": ["uninstalled", "hidden-base"]})
    registry = ProjectRegistry.load(populated_root)

    names = [project.name for project in registry["consumer"].dependency_projects()]

    assert names == ["uninstalled", "hidden-base"]


def test_install_path_is_resolved(populated_root: Path, tmp_path: Path) -> None:
    registry = ProjectRegistry.load(populated_root)

    assert registry["alpha"].install_path == tmp_path / "install"


def test_lists_path_defaults_and_overrides(projects_root: Path, write_definition, tmp_path: Path) -> None:
    absolute = tmp_path / "shared-lists"
    write_definition("implicit", {"name": "implicit"})
    write_definition("relative", {"name": "relative", "list_location": "..\\other/lists"})
    write_definition("absolute", {"name": "absolute", "list_location": str(absolute)})
    registry = ProjectRegistry.load(projects_root)

    assert registry["implicit"].lists_path == projects_root / "lists" / "implicit"
    assert registry["relative"].lists_path == tmp_path / "other" / "lists"
    assert registry["absolute"].lists_path == absolute


def test_duplicate_names_abort_loading(projects_root: Path, write_definition) -> None:
    write_definition("first", {"name": "same"})
    write_definition("second", {"name": "same"})

    with pytest.raises(ProjectConfigurationError, match="duplicate project name 'same'"):
        ProjectRegistry.load(projects_root)


def test_definitions_are_not_searched_recursively(projects_root: Path, write_definition) -> None:
    write_definition("top", {"name": "top"})
    write_definition("nested", {"name": "nested"}, root=projects_root / "sub")

    registry = ProjectRegistry.load(projects_root)

    assert registry.get("nested") is None
    assert registry.get("top") is not None


def test_invalid_arguments_are_rejected(projects_root: Path) -> None:
    registry = ProjectRegistry.load(projects_root)

    with pytest.raises(ValueError):
        registry.get("")
    with pytest.raises(ValueError):
        ProjectRegistry.load("")
    with pytest.raises(KeyError):
        registry["missing"]


def test_preferred_project_is_trimmed(populated_root: Path) -> None:
    registry = ProjectRegistry.load(populated_root, "  beta \n")

    assert registry.active_project is registry["beta"]


def test_unknown_preferred_project_ignores_marker(populated_root: Path) -> None:
    (populated_root / "current.txt").write_text("alpha", encoding="utf-8")

    registry = ProjectRegistry.load(populated_root, "gamma")

    assert registry.active_project is None


def test_marker_selects_active_project(populated_root: Path) -> None:
    (populated_root / "current.txt").write_text("  alpha\r\n", encoding="utf-8")

    registry = ProjectRegistry.load(populated_root)

    assert registry.active_project is registry["alpha"]


def test_marker_naming_unknown_project_is_ignored(populated_root: Path) -> None:
    (populated_root / "current.txt").write_text("removed-game", encoding="utf-8")

    assert ProjectRegistry.load(populated_root).active_project is None


def test_active_project_round_trip(populated_root: Path) -> None:
    registry = ProjectRegistry.load(populated_root)
    registry.active_project = registry["beta"]

    marker = populated_root / "current.txt"
    assert marker.read_text(encoding="utf-8") == "beta"

    reloaded = ProjectRegistry.load(populated_root)
    assert reloaded.active_project is not None
    assert reloaded.active_project.name == "beta"

    reloaded.set_active(None)
    assert not marker.exists()
    assert ProjectRegistry.load(populated_root).active_project is None


def test_clearing_without_marker_is_harmless(populated_root: Path) -> None:
    registry = ProjectRegistry.load(populated_root)

    registry.active_project = None

    assert registry.active_project is None


def test_foreign_project_cannot_be_activated(populated_root: Path) -> None:
    first = ProjectRegistry.load(populated_root)
    second = ProjectRegistry.load(populated_root)

    with pytest.raises(ValueError, match="does not belong"):
        first.active_project = second["alpha"]


def test_set_active_by_unknown_name(populated_root: Path) -> None:
    registry = ProjectRegistry.load(populated_root)

    with pytest.raises(KeyError):
        registry.set_active("gamma")


def test_delegation_to_active_project(populated_root: Path, write_list) -> None:
    write_list(populated_root / "lists" / "alpha" / "names.txt", "from-alpha")
    write_list(populated_root / "lists" / "beta" / "names.txt", "from-beta")
    registry = ProjectRegistry.load(populated_root, "beta")

    hash_list = registry.load_lists("*.txt", identity)

    assert sorted(hash_list.values()) == ["from-alpha", "from-beta"]
    assert not hash_list.read_only


def test_projects_do_not_keep_registry_alive(populated_root: Path) -> None:
    registry = ProjectRegistry.load(populated_root)
    project = registry["beta"]

    del registry
    gc.collect()

    assert project.registry is None
    assert project.dependency_projects() == ()
