# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring the registry commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from ..console import detect_tty, get_console_manager
from ..errors import ProjectDataError
from ..hashing import get_hasher, get_normalizer
from ._rendering import build_project_table, build_projects_table
from .shared import CLIError, build_cli_logger, exit_with, load_registry

app = typer.Typer(
    help="Inspect game project definitions, install locations and hash lists.",
    no_args_is_help=True,
    add_completion=False,
)

RootOption = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Directory holding project definitions."),
]
ProjectOption = Annotated[
    str | None,
    typer.Option("--project", "-p", help="Project to use instead of the active one."),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate messages with emoji.")]


def _console() -> Console:
    return get_console_manager().get(color=detect_tty(), emoji=False)


@app.command("list")
def list_command(
    root: RootOption = None,
    show_all: Annotated[
        bool,
        typer.Option("--all", "-a", help="Include hidden and uninstalled projects."),
    ] = False,
    emoji: EmojiOption = False,
) -> None:
    """List the available projects."""

    logger = build_cli_logger(emoji=emoji)
    try:
        registry = load_registry(root)
    except CLIError as exc:
        raise exit_with(logger, exc) from exc

    projects = registry.all_projects() if show_all else tuple(registry)
    if not projects:
        logger.warn(f"no projects found in {registry.base_path}")
        return
    _console().print(build_projects_table(projects, active=registry.active_project))
    if registry.active_project is None:
        logger.info("no active project; run 'use NAME' to select one")


@app.command("show")
def show_command(
    name: Annotated[str, typer.Argument(help="Project name.")],
    root: RootOption = None,
    emoji: EmojiOption = False,
) -> None:
    """Show the resolved details of one project."""

    logger = build_cli_logger(emoji=emoji)
    try:
        registry = load_registry(root)
        project = registry.get(name)
        if project is None:
            raise CLIError(f"unknown project '{name}'")
    except CLIError as exc:
        raise exit_with(logger, exc) from exc
    _console().print(build_project_table(project))


@app.command("use")
def use_command(
    name: Annotated[str | None, typer.Argument(help="Project to make active.")] = None,
    clear: Annotated[bool, typer.Option("--clear", help="Clear the active project.")] = False,
    root: RootOption = None,
    emoji: EmojiOption = False,
) -> None:
    """Change the persisted active project."""

    logger = build_cli_logger(emoji=emoji)
    if clear == (name is not None):
        raise typer.BadParameter("give either a project name or --clear")
    try:
        registry = load_registry(root)
        if clear:
            registry.set_active(None)
            logger.ok("active project cleared")
            return
        if name not in registry:
            raise CLIError(f"unknown project '{name}'")
        registry.set_active(name)
    except CLIError as exc:
        raise exit_with(logger, exc) from exc
    logger.ok(f"active project is now '{name}'")


@app.command("setting")
def setting_command(
    key: Annotated[str, typer.Argument(help="Setting name.")],
    default: Annotated[str | None, typer.Option("--default", "-d", help="Value printed when unset.")] = None,
    project: ProjectOption = None,
    root: RootOption = None,
    emoji: EmojiOption = False,
) -> None:
    """Print a setting of the active project."""

    logger = build_cli_logger(emoji=emoji)
    try:
        registry = load_registry(root, current_project=project)
    except CLIError as exc:
        raise exit_with(logger, exc) from exc
    value = registry.get_setting(key, default)
    if value is None:
        logger.warn(f"setting '{key}' is not defined")
        raise typer.Exit(code=1)
    logger.echo(value)


@app.command("lists")
def lists_command(
    pattern: Annotated[str, typer.Argument(help="Filename glob selecting list files, e.g. '*.namelist'.")],
    hasher: Annotated[str, typer.Option("--hasher", help="Hash function applied to each entry.")] = "fnv1a32",
    normalize: Annotated[
        str | None,
        typer.Option("--normalize", help="Normaliser applied before hashing (lower, upper, backslash)."),
    ] = None,
    lookup: Annotated[str | None, typer.Option("--lookup", help="Report the hash of this string.")] = None,
    project: ProjectOption = None,
    root: RootOption = None,
    emoji: EmojiOption = False,
) -> None:
    """Aggregate the hash lists of the active project."""

    logger = build_cli_logger(emoji=emoji)
    try:
        hash_function = get_hasher(hasher)
        modifier = get_normalizer(normalize) if normalize else None
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0]) from exc

    try:
        registry = load_registry(root, current_project=project)
        if registry.active_project is None:
            raise CLIError("no active project; pass --project or run 'use' first")
        hash_list = registry.load_lists(pattern, hash_function, modifier)
    except ProjectDataError as exc:
        raise exit_with(logger, CLIError(str(exc))) from exc
    except CLIError as exc:
        raise exit_with(logger, exc) from exc

    logger.echo(f"{registry.active_project.name}: {len(hash_list)} entries")
    if lookup is not None:
        source = modifier(lookup) if modifier is not None else lookup
        hash_value = hash_function(source)
        rendered = f"{hash_value:#x}" if isinstance(hash_value, int) else repr(hash_value)
        known = hash_list.lookup(hash_value)
        logger.echo(f"{source} -> {rendered} ({'known' if known is not None else 'unknown'})")


__all__ = ["app"]
