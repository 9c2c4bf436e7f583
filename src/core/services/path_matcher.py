"""Exclusion matching on path components.

A pattern matches only when it covers whole path components: "temp" excludes
"src/temp/x.c" but not "template.c". No globbing, no regex, case-sensitive.
"""

from __future__ import annotations

from typing import Iterable


PATH_SEPARATORS = ("/", "\\")


def _is_sep(ch: str) -> bool:
    return ch in PATH_SEPARATORS


def is_path_excluded(path: str, pattern: str) -> bool:
    """Return True if `pattern` occurs in `path` on component boundaries.

    Every occurrence is tried, so an early mid-token hit does not hide a
    later aligned one:

    - "temp"          -> True
    - "temp/file.c"   -> True
    - "src/temp/x.c"  -> True
    - "template.c"    -> False
    - "item_post.c"   -> False ("_" is not a separator)
    """

    if not pattern:
        return False

    start = 0
    while True:
        idx = path.find(pattern, start)
        if idx == -1:
            return False

        end = idx + len(pattern)
        left_ok = idx == 0 or _is_sep(path[idx - 1])
        right_ok = end == len(path) or _is_sep(path[end])
        if left_ok and right_ok:
            return True

        start = idx + 1


def find_exclusion(path: str, patterns: Iterable[str]) -> str | None:
    """First pattern (in list order) that excludes `path`, or None."""

    for pattern in patterns:
        if is_path_excluded(path, pattern):
            return pattern
    return None


def is_excluded_by_any(path: str, patterns: Iterable[str]) -> bool:
    return find_exclusion(path, patterns) is not None
