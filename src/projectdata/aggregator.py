# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Build hash lists from a project's list directory and those of its dependencies."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import HashCollisionError
from .hash_list import HashList
from .io import iter_list_lines
from .scanner import list_documents
from .types import LIST_COMMENT_PREFIX, LIST_ENCODING, EntryObserver, H, Hasher, Normalizer

if TYPE_CHECKING:
    from .project import Project

LOGGER = logging.getLogger(__name__)


def list_roots(project: Project) -> tuple[Path, ...]:
    """Return the list directories scanned for ``project``, in processing order.

    Dependencies come first in declaration order, followed by the project's
    own list directory. Only direct dependencies take part; unknown names are
    skipped.
    """

    roots = [dependency.lists_path for dependency in project.dependency_projects()]
    roots.append(project.lists_path)
    return tuple(roots)


def load_lists(
    project: Project,
    pattern: str,
    hasher: Hasher[H],
    modifier: Normalizer | None = None,
    extra: EntryObserver[H] | None = None,
    *,
    encoding: str = LIST_ENCODING,
) -> HashList[H]:
    """Aggregate every list file visible to ``project`` into a fresh hash list.

    Args:
        project: Project whose dependencies and own lists are loaded.
        pattern: Filename glob selecting list files.
        hasher: Function computing the hash of a source string.
        modifier: Optional normaliser applied to each line before hashing.
        extra: Optional observer called with ``(hash, source, line)`` for every accepted line.
        encoding: Text encoding of list files.

    Returns:
        HashList[H]: New hash list owned by the caller.

    Raises:
        HashCollisionError: If two different source strings produce the same hash.
    """

    if not pattern:
        raise ValueError("pattern must be a non-empty glob")
    hash_list: HashList[H] = HashList()
    for root in list_roots(project):
        load_lists_from(root, pattern, hasher, modifier, extra, hash_list, encoding=encoding)
    return hash_list


def load_lists_from(
    root: Path,
    pattern: str,
    hasher: Hasher[H],
    modifier: Normalizer | None,
    extra: EntryObserver[H] | None,
    hash_list: HashList[H],
    *,
    encoding: str = LIST_ENCODING,
) -> None:
    """Merge the list files found under ``root`` into ``hash_list``.

    A missing directory contributes nothing. Identical entries overwrite each
    other silently; different strings sharing a hash abort the load.
    """

    if not root.is_dir():
        LOGGER.debug("list directory %s does not exist, skipping", root)
        return

    for path in list_documents(root, pattern):
        LOGGER.debug("loading list %s", path)
        for raw_line in iter_list_lines(path, encoding=encoding):
            if raw_line.startswith(LIST_COMMENT_PREFIX):
                continue
            line = raw_line.strip()
            if not line:
                continue

            source = line if modifier is None else modifier(line)
            hash_value = hasher(source)

            existing = hash_list.lookup(hash_value)
            if hash_value in hash_list and existing != source:
                raise HashCollisionError(
                    source=source,
                    existing=existing,
                    hash_value=hash_value,
                    path=path,
                )
            hash_list.assign(hash_value, source)

            if extra is not None:
                extra(hash_value, source, line)


__all__ = ["list_roots", "load_lists", "load_lists_from"]
