# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Mapping from computed hashes back to the strings that produced them."""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, ValuesView
from typing import Any, Generic, cast

from .types import H


class HashList(Generic[H]):
    """Container reversing hashed identifiers to their source strings.

    The container itself does not arbitrate collisions: :meth:`add` refuses
    duplicate hashes and :meth:`assign` overwrites, leaving the policy to the
    list aggregator.
    """

    __slots__ = ("_lookup", "_frozen")

    def __init__(self) -> None:
        self._lookup: dict[H, str] = {}
        self._frozen = False

    @classmethod
    def empty(cls) -> HashList[H]:
        """Return the shared read-only empty hash list."""

        return cast("HashList[H]", _EMPTY)

    @property
    def read_only(self) -> bool:
        """Return ``True`` for the shared empty instance."""

        return self._frozen

    def add(self, hash_value: H, value: str) -> None:
        """Insert ``value`` under ``hash_value``.

        Raises:
            KeyError: If ``hash_value`` is already present.
            TypeError: If called on the shared empty instance.
        """

        self._check_writable()
        if hash_value in self._lookup:
            raise KeyError(f"hash {hash_value!r} is already present")
        self._lookup[hash_value] = value

    def assign(self, hash_value: H, value: str) -> None:
        """Store ``value`` under ``hash_value``, replacing any previous entry."""

        self._check_writable()
        self._lookup[hash_value] = value

    def contains(self, hash_value: H) -> bool:
        return hash_value in self._lookup

    def lookup(self, hash_value: H) -> str | None:
        """Return the source string for ``hash_value`` or ``None`` when unknown."""

        return self._lookup.get(hash_value)

    def values(self) -> ValuesView[str]:
        return self._lookup.values()

    def items(self) -> ItemsView[H, str]:
        return self._lookup.items()

    def __contains__(self, hash_value: object) -> bool:
        return hash_value in self._lookup

    def __getitem__(self, hash_value: H) -> str | None:
        return self._lookup.get(hash_value)

    def __iter__(self) -> Iterator[H]:
        return iter(self._lookup)

    def __len__(self) -> int:
        return len(self._lookup)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._lookup)})"

    def _check_writable(self) -> None:
        if self._frozen:
            raise TypeError("the shared empty hash list is read-only")


_EMPTY: HashList[Any] = HashList()
_EMPTY._frozen = True

__all__ = ["HashList"]
