"""Fatal errors.

Only conditions that abort the whole run are exceptions here. Per-file
problems (unreadable file, malformed comment, failed write) are reported as
`FileOutcome` values and never cross the file boundary.
"""

from __future__ import annotations


class LiceError(Exception):
    """Base class for errors that stop the run before or during setup."""


class ConfigError(LiceError):
    """Malformed invocation (missing required option, bad value)."""


class LicenseReadError(LiceError):
    """The license text file could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__("Failed to read license file")
        self.path = path
