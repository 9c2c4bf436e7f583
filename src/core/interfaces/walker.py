"""Tree walker contract.

Why Protocol:
- Structural contract (duck typing), no inheritance needed.
- The pipeline can be driven by the filesystem walker or by a stub in tests.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from core.domain.models import EntryType


@runtime_checkable
class TreeWalker(Protocol):
    """Enumerates entries under a root path.

    Design rules:
    - Synchronous; one entry at a time.
    - Returns False when `root` cannot be traversed as a directory, so the
      caller may treat it as a single file instead.
    """

    def __call__(self, root: str, callback: Callable[[str, EntryType], bool]) -> bool:
        ...
