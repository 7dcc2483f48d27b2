# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

from projectdata.model_install import RegistryView

DefinitionWriter = Callable[..., Path]


class FakeRegistry:
    """In-memory ``RegistryReader`` keyed by key path and value name."""

    def __init__(
        self,
        values: Mapping[tuple[str, str | None], str] | None = None,
        view_values: Mapping[tuple[str, RegistryView, str, str | None], str] | None = None,
    ) -> None:
        self.values = dict(values or {})
        self.view_values = dict(view_values or {})
        self.calls: list[tuple[object, ...]] = []

    def get_value(self, key: str, value_name: str | None, default: str | None) -> str | None:
        self.calls.append(("value", key, value_name))
        return self.values.get((key, value_name), default)

    def get_view_value(
        self,
        hive: str,
        view: RegistryView,
        subkey: str,
        value_name: str | None,
        default: str | None,
    ) -> str | None:
        self.calls.append(("view", hive, view, subkey, value_name))
        return self.view_values.get((hive, view, subkey, value_name), default)


@pytest.fixture
def fake_registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def projects_root(tmp_path: Path) -> Path:
    """Return an existing, empty registry base directory."""
    root = tmp_path / "projects"
    root.mkdir()
    return root


@pytest.fixture
def write_definition(projects_root: Path) -> DefinitionWriter:
    """Return a helper writing ``<stem>.json`` definition documents into ``projects_root``."""

    def _write(stem: str, payload: Mapping[str, object] | str, *, root: Path | None = None) -> Path:
        target_root = root or projects_root
        target_root.mkdir(parents=True, exist_ok=True)
        path = target_root / f"{stem}.json"
        text = payload if isinstance(payload, str) else json.dumps(payload, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_list() -> Callable[..., Path]:
    """Return a helper writing list files, creating parent directories."""

    def _write(path: Path, *lines: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
