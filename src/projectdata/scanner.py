# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem scanning utilities for definition and list files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .types import DEFINITION_GLOB


@dataclass(slots=True)
class DefinitionScanner:
    """Scan a registry base directory for project definition documents."""

    base_path: Path
    pattern: str = DEFINITION_GLOB

    def definition_documents(self) -> tuple[Path, ...]:
        """Return sorted definition document paths directly under ``base_path``.

        Returns:
            tuple[Path, ...]: Definition files; empty when the directory is missing.
        """
        if not self.base_path.is_dir():
            return ()
        return tuple(sorted(path for path in self.base_path.glob(self.pattern) if path.is_file()))


def list_documents(root: Path, pattern: str) -> tuple[Path, ...]:
    """Return list files under ``root`` matching ``pattern``, searched recursively.

    Args:
        root: List directory to scan.
        pattern: Filename glob supplied by the caller, e.g. ``*.namelist``.

    Returns:
        tuple[Path, ...]: Matching files in sorted path order, empty when ``root`` is missing.
    """
    if not root.is_dir():
        return ()
    return tuple(sorted(path for path in root.rglob(pattern) if path.is_file()))


__all__ = ["DefinitionScanner", "list_documents"]
