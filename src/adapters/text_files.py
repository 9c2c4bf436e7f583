"""Plain text file I/O.

Why a tiny adapter:
- Newline translation is disabled both ways so CRLF files keep their endings
  and the golden-header prefix check sees the real bytes.
- The processor can be tested against real temp files without mocks.
"""

from __future__ import annotations

from pathlib import Path


def read_text(path: str | Path, encoding: str | None = None) -> str:
    """Read the whole file; `encoding=None` means the platform default."""

    with open(path, "r", encoding=encoding, newline="") as fh:
        return fh.read()


def write_text(path: str | Path, content: str, encoding: str | None = None) -> None:
    """Overwrite `path` in place (no temp file, no backup)."""

    with open(path, "w", encoding=encoding, newline="") as fh:
        fh.write(content)
