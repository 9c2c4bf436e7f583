"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic free of presentation details.
- Usage text and tables are reused by help, errors and the run summary.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from core.domain.models import FileOutcome, RunSummary


LICE_VERSION = "0.1.0"

USAGE_INFO = """\
lice - Automate source code license headers

Usage:
    lice [options] [paths...]

Arguments:
    [paths]                  Directories or files to process.
                             If omitted, the current directory is used.

Options:
    -f, --file <path>        Path to the license header file (Required).
    -e, --exclude <pattern>  Exclude file/directory matching this pattern.
                             Can be specified multiple times.
    -h, --help               Show this help message.

Examples:
    # Apply license to the current directory
    lice -f HEADER.txt

    # Apply to 'src' and 'include', excluding 'vendor' and 'build'
    lice -f HEADER.txt -e vendor -e build src include
"""

_OUTCOME_STYLES: dict[FileOutcome, str] = {
    FileOutcome.ALREADY_CURRENT: "green",
    FileOutcome.HEADER_REPLACED: "cyan",
    FileOutcome.HEADER_ADDED: "cyan",
    FileOutcome.SKIPPED_EXCLUDED: "dim",
    FileOutcome.SKIPPED_WRONG_EXTENSION: "dim",
    FileOutcome.SKIPPED_READ_ERROR: "yellow",
    FileOutcome.SKIPPED_MALFORMED_COMMENT: "yellow",
    FileOutcome.SKIPPED_WRITE_ERROR: "red",
}


def print_usage(console: Console, *, with_version: bool = False) -> None:
    if with_version:
        console.print(f"lice v{LICE_VERSION}", markup=False, highlight=False)
    console.print(USAGE_INFO, markup=False, highlight=False, soft_wrap=True)


def print_error(console: Console, message: str) -> None:
    """`Error: <message>` followed by the usage text."""

    console.print(f"Error: {message}", markup=False, highlight=False, soft_wrap=True)
    print_usage(console)


def build_summary_table(summary: RunSummary) -> Table:
    """Outcome counts of a run; outcomes that never happened are left out."""

    table = Table(title="License headers")
    table.add_column("Outcome", no_wrap=True)
    table.add_column("Entries", justify="right")

    for outcome in FileOutcome:
        n = summary.count(outcome)
        if n:
            table.add_row(outcome.label(), str(n), style=_OUTCOME_STYLES[outcome])

    if summary.missing_targets:
        table.add_row("Missing targets", str(len(summary.missing_targets)), style="yellow")
    return table
