"""Recursive directory traversal.

The walker only enumerates; deciding what to do with an entry belongs to the
callback. Symlinks are reported as such and never followed.
"""

from __future__ import annotations

import logging
import os
from typing import Callable

from core.domain.models import EntryType


logger = logging.getLogger("lice.walker")


WalkCallback = Callable[[str, EntryType], bool]


def _entry_type(entry: os.DirEntry[str]) -> EntryType:
    if entry.is_symlink():
        return EntryType.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return EntryType.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return EntryType.FILE
    return EntryType.OTHER


def _walk_dir(directory: str, callback: WalkCallback) -> None:
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        logger.warning("Failed to read directory '%s': %s", directory, exc)
        return

    for entry in entries:
        path = os.path.join(directory, entry.name)
        kind = _entry_type(entry)
        descend = callback(path, kind)
        if descend and kind is EntryType.DIRECTORY:
            _walk_dir(path, callback)


def walk_tree(root: str, callback: WalkCallback) -> bool:
    """Visit every entry below `root` depth-first, in name order.

    `callback(path, entry_type)` returns whether a directory entry should be
    descended into. Returns False, without calling the callback, when `root`
    is not a traversable directory.
    """

    if not os.path.isdir(root):
        return False
    _walk_dir(root, callback)
    return True
