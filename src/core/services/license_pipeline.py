"""License run orchestration.

This module owns the whole run once the CLI has produced a `LiceConfig`:
build the golden header once, walk every target, and feed each entry through
exclusion, type and extension filters before handing it to the processor.
The CLI only renders the returned `RunSummary`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import partial

from adapters.fs_walker import walk_tree
from adapters.text_files import read_text
from core.config import AppSettings, load_settings
from core.domain.errors import LicenseReadError
from core.domain.models import EntryType, FileOutcome, LiceConfig, RunSummary
from core.interfaces.walker import TreeWalker
from core.services.file_processor import process_file
from core.services.header_formatter import format_license_as_comment
from core.services.path_matcher import find_exclusion


logger = logging.getLogger("lice.pipeline")

SOURCE_EXTENSIONS: frozenset[str] = frozenset({"c", "h"})


@dataclass(frozen=True)
class WalkContext:
    """Read-only state shared by every callback invocation of one run."""

    config: LiceConfig
    golden_header: str
    encoding: str | None = None


def path_extension(path: str) -> str:
    """Extension without the leading dot ("" for none or dotfiles)."""

    return os.path.splitext(path)[1][1:]


def build_golden_header(license_file: str, encoding: str | None = None) -> str:
    try:
        raw_license = read_text(license_file, encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise LicenseReadError(license_file) from exc
    return format_license_as_comment(raw_license)


def license_walk_cb(path: str, entry_type: EntryType, ctx: WalkContext, summary: RunSummary) -> bool:
    """Handle one walked entry; returns whether to descend into it."""

    pattern = find_exclusion(path, ctx.config.excludes)
    if pattern is not None:
        logger.info("[Exclude] Skipping: %s (matches '%s')", path, pattern)
        summary.record(FileOutcome.SKIPPED_EXCLUDED)
        return False

    if entry_type is not EntryType.FILE:
        return True

    if path_extension(path) not in SOURCE_EXTENSIONS:
        logger.debug("Ignoring %s (not a .c/.h file)", path)
        summary.record(FileOutcome.SKIPPED_WRONG_EXTENSION)
        return True

    summary.record(process_file(path, ctx.golden_header, encoding=ctx.encoding))
    return True


def run_logic(
    config: LiceConfig,
    settings: AppSettings | None = None,
    *,
    walker: TreeWalker = walk_tree,
) -> RunSummary:
    """Apply the license to every configured target.

    Raises `LicenseReadError` if the license text cannot be read; every other
    problem is per-target or per-file and only logged.
    """

    settings = settings or load_settings()
    ctx = WalkContext(
        config=config,
        golden_header=build_golden_header(config.license_file, settings.file_encoding),
        encoding=settings.file_encoding,
    )
    summary = RunSummary()
    callback = partial(license_walk_cb, ctx=ctx, summary=summary)

    for root in config.targets:
        if not os.path.exists(root):
            logger.warning("Target path not found: %s", root)
            summary.missing_targets.append(root)
            continue

        if not walker(root, callback):
            # not a directory: process the target itself
            callback(root, EntryType.FILE)

    return summary
