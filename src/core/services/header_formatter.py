"""Golden header formatting.

Turns the raw license text into the canonical `/* ... */` block that every
source file is compared against. Output depends only on the lines; `*/`
inside the license body is not escaped.
"""

from __future__ import annotations

from typing import Iterator


COMMENT_OPEN = "/*"
COMMENT_CLOSE = "*/"


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines of `text` split on "\\n", dropping a trailing "\\r".

    A final newline does not produce an extra empty line; text after the
    last newline is still a line.
    """

    start = 0
    length = len(text)
    while start < length:
        nl = text.find("\n", start)
        if nl == -1:
            line = text[start:]
            start = length
        else:
            line = text[start:nl]
            start = nl + 1
        if line.endswith("\r"):
            line = line[:-1]
        yield line


def format_license_as_comment(raw_license: str) -> str:
    """Format `raw_license` as a block comment followed by one blank line.

    >>> format_license_as_comment("Copyright X\\n\\nLine 2")
    '/*\\n * Copyright X\\n *\\n * Line 2\\n */\\n\\n'
    """

    parts = [COMMENT_OPEN + "\n"]
    for line in iter_lines(raw_license):
        # no trailing space on empty lines
        parts.append(f" * {line}\n" if line else " *\n")
    parts.append(f" {COMMENT_CLOSE}\n\n")
    return "".join(parts)
