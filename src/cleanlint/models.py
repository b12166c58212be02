# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the cleanlint package."""

from __future__ import annotations

from enum import Enum, IntEnum

from pydantic import BaseModel, ConfigDict, Field


class FindingKind(str, Enum):
    """Enumerate the built-in whitespace and line-ending defects."""

    TRAILING_WHITESPACE = "trailing_whitespace"
    MISSING_FINAL_NEWLINE = "missing_final_newline"
    CRLF_LINE_ENDING = "crlf_line_ending"
    TRAILING_BLANK_LINES = "trailing_blank_lines"

    @property
    def description(self) -> str:
        """Return the human-readable description of the defect."""

        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[FindingKind, str] = {
    FindingKind.TRAILING_WHITESPACE: "Trailing whitespace",
    FindingKind.MISSING_FINAL_NEWLINE: "Missing newline at end of file",
    FindingKind.CRLF_LINE_ENDING: "CRLF line ending",
    FindingKind.TRAILING_BLANK_LINES: "Multiple blank lines at end of file",
}


class FileErrorKind(str, Enum):
    """Enumerate recoverable per-file failures."""

    UNREADABLE = "unreadable"
    NOT_TEXT = "not_text"


class ExitCode(IntEnum):
    """Process exit statuses reported by the CLI.

    Code  Meaning
    ----  -------
      0   Clean; no findings and no per-file errors
      1   Findings or per-file errors recorded
      2   Fatal configuration or output error
    """

    SUCCESS = 0
    ISSUES = 1
    ERROR = 2


class Finding(BaseModel):
    """One detected defect in one file."""

    model_config = ConfigDict(frozen=True)

    kind: FindingKind
    line: int | None = None


class FileError(BaseModel):
    """Recoverable failure encountered while reading or decoding a file."""

    model_config = ConfigDict(frozen=True)

    kind: FileErrorKind
    message: str


class FileOutcome(BaseModel):
    """Result of linting a single file: findings or an error, never both."""

    model_config = ConfigDict(frozen=True)

    findings: tuple[Finding, ...] = Field(default_factory=tuple)
    error: FileError | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the file produced neither findings nor an error."""

        return not self.findings and self.error is None


class FileResult(BaseModel):
    """Report entry pairing a displayed path with its outcome."""

    model_config = ConfigDict(frozen=True)

    path: str
    findings: tuple[Finding, ...] = Field(default_factory=tuple)
    error: FileError | None = None


class Report(BaseModel):
    """Ordered collection of per-file results for a complete run."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[FileResult, ...] = Field(default_factory=tuple)
    files_scanned: int = 0

    @property
    def finding_count(self) -> int:
        """Return the total number of findings across all files."""

        return sum(len(entry.findings) for entry in self.entries)

    @property
    def error_count(self) -> int:
        """Return the number of files that could not be linted."""

        return sum(1 for entry in self.entries if entry.error is not None)

    @property
    def files_with_issues(self) -> int:
        """Return the number of files that produced findings or errors."""

        return len(self.entries)

    @property
    def clean(self) -> bool:
        """Return ``True`` when no file produced findings or errors."""

        return not self.entries

    @property
    def exit_code(self) -> ExitCode:
        """Return the exit status derived from the report contents."""

        return ExitCode.SUCCESS if self.clean else ExitCode.ISSUES


__all__ = [
    "ExitCode",
    "FileError",
    "FileErrorKind",
    "FileOutcome",
    "FileResult",
    "Finding",
    "FindingKind",
    "Report",
]
