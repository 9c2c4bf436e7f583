"""`lice` command line.

Why the app runs in non-standalone mode:
- Parser errors (unknown option, missing value) and our own fatal errors
  must all end as `Error: <message>` plus the usage text on stderr, with a
  non-zero exit status.

Why arguments are pre-scanned:
- Tokens are read left to right: the first `-h/--help` wins, and the first
  unrecognized `-` token (including a bare `-` or `--`) fails the run.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cli.ui_components import build_summary_table, print_error, print_usage
from core.config import load_settings
from core.domain.errors import ConfigError, LiceError
from core.domain.models import LiceConfig
from core.services.license_pipeline import run_logic

app = typer.Typer(add_completion=False, help="Automate source code license headers.")

_console = Console()
_err_console = Console(stderr=True)

# typer runs on either the installed click or its own bundled copy; both
# derive BadParameter from their ClickException.
_ParserError: type[Exception] = next(
    cls for cls in typer.BadParameter.__mro__ if cls.__name__ == "ClickException"
)

VALUE_FLAGS = ("-f", "--file", "-e", "--exclude")
HELP_FLAGS = ("-h", "--help")


def _is_known_flag(token: str) -> bool:
    if token in VALUE_FLAGS or token in HELP_FLAGS:
        return True
    # attached values: --file=HEADER.txt, -fHEADER.txt
    if token.startswith(("--file=", "--exclude=")):
        return True
    return token[:2] in ("-f", "-e") and not token.startswith("--")


def wants_help(args: Sequence[str]) -> bool:
    """Scan `args` left to right.

    Returns True when `-h/--help` comes before any unknown option; raises
    `ConfigError` for the first unknown `-` token. The value following
    `-f`/`-e` is skipped.
    """

    tokens = iter(args)
    for token in tokens:
        if token in HELP_FLAGS:
            return True
        if token in VALUE_FLAGS:
            next(tokens, None)
            continue
        if token.startswith("-") and not _is_known_flag(token):
            raise ConfigError(f"Unknown option provided: {token}")
    return False


def configure_logging(level: str) -> None:
    """Route `lice.*` loggers through Rich on stderr."""

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    logger = logging.getLogger("lice")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)


def build_config(
    license_file: str | None,
    excludes: Sequence[str] | None,
    paths: Sequence[str] | None,
) -> LiceConfig:
    if not license_file:
        raise ConfigError("Missing required argument: -f/--file")
    for path in paths or ():
        if path.startswith("-"):
            raise ConfigError(f"Unknown option provided: {path}")
    return LiceConfig(
        license_file=license_file,
        excludes=tuple(excludes or ()),
        targets=tuple(paths or ()),
    )


@app.command(add_help_option=False)
def lice(
    license_file: Optional[str] = typer.Option(
        None, "-f", "--file", metavar="<path>", help="Path to the license header file (Required)."
    ),
    excludes: Optional[List[str]] = typer.Option(
        None, "-e", "--exclude", metavar="<pattern>", help="Exclude file/directory matching this pattern."
    ),
    paths: Optional[List[str]] = typer.Argument(None, help="Directories or files to process."),
) -> None:
    """Insert or update the license header of every .c/.h file under PATHS."""

    config = build_config(license_file, excludes, paths)
    settings = load_settings()
    configure_logging(settings.log_level)

    summary = run_logic(config, settings)

    if settings.show_summary and summary.total:
        _console.print(build_summary_table(summary))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        if wants_help(args):
            print_usage(_console, with_version=True)
            return 0
        result = app(args=args, prog_name="lice", standalone_mode=False)
    except (LiceError, ValidationError) as exc:
        print_error(_err_console, str(exc))
        return 1
    except _ParserError as exc:
        print_error(_err_console, exc.format_message())
        return 1
    return result if isinstance(result, int) else 0


def run() -> None:
    raise SystemExit(main())
