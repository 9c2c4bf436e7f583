"""Per-file header check and rewrite.

One file goes through exactly one of these paths:

- unreadable                     -> SKIPPED_READ_ERROR, untouched
- starts with the golden header  -> ALREADY_CURRENT, no write
- starts with "/*" but no "*/"   -> SKIPPED_MALFORMED_COMMENT, untouched
- starts with "/*"               -> old block replaced (HEADER_REPLACED)
- anything else                  -> header prepended (HEADER_ADDED)

Failures are logged and returned as outcomes; they never abort the run.
"""

from __future__ import annotations

import logging

from adapters.text_files import read_text, write_text
from core.domain.models import FileOutcome
from core.services.header_formatter import COMMENT_CLOSE, COMMENT_OPEN


logger = logging.getLogger("lice.processor")

# Only these are skipped after the closing "*/" (tabs are kept).
_BODY_LEADING_WS = " \r\n"


def splice_header(content: str, golden_header: str) -> str | None:
    """New file content with `golden_header` on top.

    Returns None when `content` opens a block comment that is never closed.
    """

    if not content.startswith(COMMENT_OPEN):
        return golden_header + content

    end = content.find(COMMENT_CLOSE)
    if end == -1:
        return None

    body = content[end + len(COMMENT_CLOSE):].lstrip(_BODY_LEADING_WS)
    return golden_header + body


def process_file(filepath: str, golden_header: str, *, encoding: str | None = None) -> FileOutcome:
    try:
        content = read_text(filepath, encoding)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read file '%s': %s", filepath, exc)
        return FileOutcome.SKIPPED_READ_ERROR

    if content.startswith(golden_header):
        logger.info("License OK: %s", filepath)
        return FileOutcome.ALREADY_CURRENT

    new_content = splice_header(content, golden_header)
    if new_content is None:
        logger.warning("Skipping '%s' (malformed block comment)", filepath)
        return FileOutcome.SKIPPED_MALFORMED_COMMENT

    if content.startswith(COMMENT_OPEN):
        logger.info("Updating license: %s", filepath)
        outcome = FileOutcome.HEADER_REPLACED
    else:
        logger.info("Adding license: %s", filepath)
        outcome = FileOutcome.HEADER_ADDED

    try:
        write_text(filepath, new_content, encoding)
    except (OSError, UnicodeEncodeError) as exc:
        logger.warning("Could not write file '%s': %s", filepath, exc)
        return FileOutcome.SKIPPED_WRITE_ERROR

    return outcome


def apply_license_to_file(filepath: str, golden_header: str, *, encoding: str | None = None) -> bool:
    """True when the file is processed or already carries the header."""

    return process_file(filepath, golden_header, encoding=encoding).ok
