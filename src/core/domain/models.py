"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation at the edge (CLI arguments) with self-documenting fields.
- Frozen models make the run configuration immutable once parsed.

Note:
- These models describe *what* a run is about, not *how* files are touched.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


DEFAULT_TARGET = "."


class LiceConfig(BaseModel):
    """Parsed invocation: which license to apply, where, and what to skip."""

    model_config = ConfigDict(frozen=True)

    license_file: str = Field(
        ...,
        min_length=1,
        description="Path to the raw license text (-f/--file).",
    )
    excludes: tuple[str, ...] = Field(
        default=(),
        description="Exclusion patterns, matched as whole path components (-e/--exclude).",
    )
    targets: tuple[str, ...] = Field(
        default=(DEFAULT_TARGET,),
        description="Files or directories to process; the current directory when omitted.",
    )

    @field_validator("targets", mode="after")
    @classmethod
    def _default_to_cwd(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return value or (DEFAULT_TARGET,)


class EntryType(str, Enum):
    """Kind of entry reported by the tree walker."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class FileOutcome(str, Enum):
    """What happened to a single walked entry."""

    ALREADY_CURRENT = "already-current"
    HEADER_REPLACED = "header-replaced"
    HEADER_ADDED = "header-added"
    SKIPPED_EXCLUDED = "skipped-excluded"
    SKIPPED_WRONG_EXTENSION = "skipped-wrong-extension"
    SKIPPED_READ_ERROR = "skipped-read-error"
    SKIPPED_MALFORMED_COMMENT = "skipped-malformed-comment"
    SKIPPED_WRITE_ERROR = "skipped-write-error"

    @property
    def ok(self) -> bool:
        """True when the file ends up carrying the golden header."""

        return self in _OK_OUTCOMES

    def label(self) -> str:
        return self.value.replace("-", " ").capitalize()


_OK_OUTCOMES = frozenset(
    {
        FileOutcome.ALREADY_CURRENT,
        FileOutcome.HEADER_REPLACED,
        FileOutcome.HEADER_ADDED,
    }
)


class RunSummary(BaseModel):
    """Aggregated outcomes of one run (reporting only, never persisted)."""

    counts: dict[FileOutcome, int] = Field(default_factory=dict)
    missing_targets: list[str] = Field(default_factory=list)

    def record(self, outcome: FileOutcome) -> None:
        self.counts[outcome] = self.counts.get(outcome, 0) + 1

    def count(self, outcome: FileOutcome) -> int:
        return self.counts.get(outcome, 0)

    @property
    def total(self) -> int:
        return sum(self.counts.values())
