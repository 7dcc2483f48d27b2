# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Install location models describing how a project's install directory is discovered."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from .errors import ProjectConfigurationError
from .types import JSONValue
from .utils import expect_string, object_array, optional_string


class InstallActionKind(str, Enum):
    """Enumerate the install location action types understood by the resolver."""

    REGISTRY = "registry"
    REGISTRY_VIEW = "registryview"
    PATH = "path"
    COMBINE = "combine"
    PARENT = "parent"

    @classmethod
    def from_raw(cls, raw: str, *, context: str) -> InstallActionKind:
        """Return the kind named by ``raw``.

        Raises:
            ProjectConfigurationError: If ``raw`` is not a known action type.
        """
        try:
            return cls(raw)
        except ValueError as exc:
            raise ProjectConfigurationError(
                f"{context}: unhandled install location action type '{raw}'",
            ) from exc


class RegistryView(str, Enum):
    """Registry views selectable by ``registryview`` actions."""

    DEFAULT = "default"
    REGISTRY32 = "registry32"
    REGISTRY64 = "registry64"


@dataclass(frozen=True, slots=True)
class InstallAction:
    """One step of an install location chain.

    Only the fields relevant to ``kind`` are populated: ``key`` for
    ``registry``; ``hive``, ``view`` and ``subkey`` for ``registryview``;
    ``value`` is the value name for registry actions and the path fragment
    for ``path`` and ``combine``.
    """

    kind: InstallActionKind
    value: str | None = None
    key: str | None = None
    hive: str | None = None
    view: RegistryView = RegistryView.DEFAULT
    subkey: str | None = None
    default: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> InstallAction:
        """Create an ``InstallAction`` from JSON data.

        Args:
            data: Mapping containing the action configuration.
            context: Human-readable context used in error messages.

        Returns:
            InstallAction: Frozen action definition.

        Raises:
            ProjectConfigurationError: If the action type is unknown or required fields are missing.
        """

        kind = InstallActionKind.from_raw(expect_string(data.get("type"), key="type", context=context), context=context)
        value = optional_string(data.get("value"), key="value", context=context)
        default = optional_string(data.get("default"), key="default", context=context)
        if kind is InstallActionKind.REGISTRY:
            return InstallAction(
                kind=kind,
                key=expect_string(data.get("key"), key="key", context=context),
                value=value,
                default=default,
            )
        if kind is InstallActionKind.REGISTRY_VIEW:
            view_raw = optional_string(data.get("view"), key="view", context=context) or RegistryView.DEFAULT.value
            try:
                view = RegistryView(view_raw.lower())
            except ValueError as exc:
                raise ProjectConfigurationError(f"{context}: unknown registry view '{view_raw}'") from exc
            return InstallAction(
                kind=kind,
                hive=expect_string(data.get("hive"), key="hive", context=context),
                view=view,
                subkey=expect_string(data.get("subkey"), key="subkey", context=context),
                value=value,
                default=default,
            )
        if kind in (InstallActionKind.PATH, InstallActionKind.COMBINE):
            if value is None:
                raise ProjectConfigurationError(f"{context}: '{kind.value}' action requires a 'value'")
            return InstallAction(kind=kind, value=value)
        return InstallAction(kind=kind)


@dataclass(frozen=True, slots=True)
class InstallLocation:
    """Ordered chain of actions that must all succeed to locate an install."""

    actions: tuple[InstallAction, ...]

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, context: str) -> InstallLocation:
        """Create an ``InstallLocation`` chain from JSON data."""

        actions = tuple(
            InstallAction.from_mapping(item, context=f"{context}.actions[{index}]")
            for index, item in enumerate(object_array(data.get("actions"), key="actions", context=context))
        )
        return InstallLocation(actions=actions)


def install_locations_array(value: JSONValue | None, *, key: str, context: str) -> tuple[InstallLocation, ...]:
    """Return the install location chains declared under ``key``."""

    return tuple(
        InstallLocation.from_mapping(item, context=f"{context}.{key}[{index}]")
        for index, item in enumerate(object_array(value, key=key, context=context))
    )


__all__ = [
    "InstallAction",
    "InstallActionKind",
    "InstallLocation",
    "RegistryView",
    "install_locations_array",
]
