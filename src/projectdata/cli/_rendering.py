# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Rich renderables used by the CLI commands."""

from __future__ import annotations

from collections.abc import Iterable

from rich.table import Table

from ..project import Project


def build_projects_table(projects: Iterable[Project], *, active: Project | None) -> Table:
    """Return a table listing ``projects`` with their resolved paths."""

    table = Table(title="Projects", show_lines=False)
    table.add_column("Name", no_wrap=True)
    table.add_column("Active", justify="center")
    table.add_column("Install path", overflow="fold")
    table.add_column("Flags")
    for project in projects:
        flags = []
        if project.hidden:
            flags.append("hidden")
        if project.install_path is None:
            flags.append("not installed")
        table.add_row(
            project.name,
            "*" if project is active else "",
            str(project.install_path) if project.install_path is not None else "-",
            ", ".join(flags),
        )
    return table


def build_project_table(project: Project) -> Table:
    """Return a key/value table describing ``project``."""

    table = Table(title=project.name, show_header=False)
    table.add_column("Field", style="bold", no_wrap=True)
    table.add_column("Value", overflow="fold")
    table.add_row("definition", str(project.source) if project.source is not None else "-")
    table.add_row("hidden", "yes" if project.hidden else "no")
    table.add_row("install path", str(project.install_path) if project.install_path is not None else "-")
    table.add_row("lists path", str(project.lists_path))
    resolved = {dependency.name for dependency in project.dependency_projects()}
    for name in project.dependencies:
        table.add_row("dependency", name if name in resolved else f"{name} (missing)")
    for key, value in sorted(project.settings.items()):
        table.add_row(f"setting {key}", value)
    return table


__all__ = ["build_project_table", "build_projects_table"]
