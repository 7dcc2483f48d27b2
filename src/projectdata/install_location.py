# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Resolve a project's install directory from its install location chains.

Each chain starts from the directory holding the definition file and runs its
actions in order, every action transforming the running path. A chain either
succeeds as a whole or is abandoned; the first chain to succeed provides the
install path. Resolution failures are expected (most titles are simply not
installed) and are never raised.
"""

from __future__ import annotations

import importlib
import logging
import os
import sys
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType
from typing import Final, Protocol, runtime_checkable

from .errors import ProjectConfigurationError
from .model_install import InstallAction, InstallActionKind, InstallLocation, RegistryView
from .utils import absolute_path, clean_path

LOGGER = logging.getLogger(__name__)

_HIVE_ALIASES: Final[dict[str, str]] = {
    "hkey_classes_root": "HKEY_CLASSES_ROOT",
    "hkcr": "HKEY_CLASSES_ROOT",
    "classesroot": "HKEY_CLASSES_ROOT",
    "hkey_current_user": "HKEY_CURRENT_USER",
    "hkcu": "HKEY_CURRENT_USER",
    "currentuser": "HKEY_CURRENT_USER",
    "hkey_local_machine": "HKEY_LOCAL_MACHINE",
    "hklm": "HKEY_LOCAL_MACHINE",
    "localmachine": "HKEY_LOCAL_MACHINE",
    "hkey_users": "HKEY_USERS",
    "hku": "HKEY_USERS",
    "users": "HKEY_USERS",
    "hkey_current_config": "HKEY_CURRENT_CONFIG",
    "hkcc": "HKEY_CURRENT_CONFIG",
    "currentconfig": "HKEY_CURRENT_CONFIG",
}


def canonical_hive(name: str) -> str | None:
    """Return the ``winreg`` constant name for a hive spelling, or ``None`` when unknown."""

    return _HIVE_ALIASES.get(name.strip().lower())


@runtime_checkable
class RegistryReader(Protocol):
    """Read-only access to a Windows-style registry.

    Implementations return ``None`` whenever a value cannot be read, whether
    the platform has no registry, the key is absent or access is denied.
    """

    def get_value(self, key: str, value_name: str | None, default: str | None) -> str | None:
        """Return the value ``value_name`` stored under the full key path ``key``."""

    def get_view_value(
        self,
        hive: str,
        view: RegistryView,
        subkey: str,
        value_name: str | None,
        default: str | None,
    ) -> str | None:
        """Return the value ``value_name`` of ``subkey`` opened in ``hive`` through ``view``."""


class WindowsRegistry:
    """``RegistryReader`` backed by the standard library ``winreg`` module."""

    def __init__(self, module: ModuleType | None = None) -> None:
        if module is None and sys.platform == "win32":
            module = importlib.import_module("winreg")
        self._winreg = module

    @property
    def available(self) -> bool:
        """Return ``True`` when a registry can be queried on this host."""

        return self._winreg is not None

    def get_value(self, key: str, value_name: str | None, default: str | None) -> str | None:
        hive, _, subkey = key.replace("/", "\\").partition("\\")
        return self._read(hive, subkey, value_name, default, access_flags=0)

    def get_view_value(
        self,
        hive: str,
        view: RegistryView,
        subkey: str,
        value_name: str | None,
        default: str | None,
    ) -> str | None:
        if self._winreg is None:
            return None
        flags = 0
        if view is RegistryView.REGISTRY32:
            flags = self._winreg.KEY_WOW64_32KEY
        elif view is RegistryView.REGISTRY64:
            flags = self._winreg.KEY_WOW64_64KEY
        return self._read(hive, subkey, value_name, default, access_flags=flags)

    def _read(
        self,
        hive: str,
        subkey: str,
        value_name: str | None,
        default: str | None,
        *,
        access_flags: int,
    ) -> str | None:
        winreg = self._winreg
        if winreg is None:
            return None
        hive_name = canonical_hive(hive)
        if hive_name is None:
            return None
        try:
            handle = winreg.OpenKey(
                getattr(winreg, hive_name),
                subkey,
                0,
                winreg.KEY_READ | access_flags,
            )
        except OSError:
            return None
        with handle:
            try:
                value, _ = winreg.QueryValueEx(handle, value_name or "")
            except FileNotFoundError:
                value = default
            except OSError:
                return None
        return value if isinstance(value, str) else None


def resolve_install_path(
    base_path: Path,
    chains: Iterable[InstallLocation],
    *,
    registry: RegistryReader | None = None,
) -> Path | None:
    """Return the install directory located by the first chain that fully resolves.

    Args:
        base_path: Starting path for every chain, normally the definition's directory.
        chains: Install location chains in declaration order.
        registry: Registry reader used by registry actions; defaults to :class:`WindowsRegistry`.

    Returns:
        Path | None: Resolved directory, or ``None`` when no chain resolves.

    Raises:
        ProjectConfigurationError: If a chain contains an action the resolver does not handle.
    """

    if base_path is None:
        raise ValueError("base_path must not be None")
    reader = registry if registry is not None else WindowsRegistry()
    for index, chain in enumerate(chains):
        resolved = resolve_chain(base_path, chain, registry=reader)
        if resolved is not None:
            LOGGER.debug("install location chain %d resolved to %s", index, resolved)
            return resolved
        LOGGER.debug("install location chain %d did not resolve", index)
    return None


def resolve_chain(
    base_path: Path,
    chain: InstallLocation,
    *,
    registry: RegistryReader | None = None,
) -> Path | None:
    """Run every action of ``chain`` starting from ``base_path``.

    Returns:
        Path | None: Final path when every action succeeds, otherwise ``None``.
    """

    reader = registry if registry is not None else WindowsRegistry()
    current: Path | None = base_path
    for action in chain.actions:
        current = _apply(action, current, reader)
        if current is None:
            return None
    return current


def _apply(action: InstallAction, current: Path, registry: RegistryReader) -> Path | None:
    kind = action.kind
    if kind is InstallActionKind.REGISTRY:
        value = registry.get_value(action.key or "", action.value, action.default)
        return Path(clean_path(value)) if value else None

    if kind is InstallActionKind.REGISTRY_VIEW:
        value = registry.get_view_value(
            action.hive or "",
            action.view,
            action.subkey or "",
            action.value,
            action.default,
        )
        return Path(clean_path(value)) if value else None

    if kind is InstallActionKind.PATH:
        candidate = absolute_path(clean_path(action.value or ""))
        return candidate if candidate.is_dir() else None

    if kind is InstallActionKind.COMBINE:
        candidate = Path(os.path.join(current, clean_path(action.value or "")))
        return candidate if candidate.is_dir() else None

    if kind is InstallActionKind.PARENT:
        parent = current.parent
        if parent == current or parent == Path(".") or not parent.is_dir():
            return None
        return parent

    raise ProjectConfigurationError(f"unhandled install location action type '{kind}'")


__all__ = [
    "RegistryReader",
    "WindowsRegistry",
    "canonical_hive",
    "resolve_chain",
    "resolve_install_path",
]
