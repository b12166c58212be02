# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Whitespace and line-ending detectors operating on raw file bytes."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from ..models import FileError, FileErrorKind, FileOutcome, Finding, FindingKind

_TRAILING_BLANKS: Final[bytes] = b" \t"
_NEWLINE: Final[bytes] = b"\n"
_CARRIAGE_RETURN: Final[bytes] = b"\r"
_NUL: Final[bytes] = b"\0"
_TEXT_ENCODING: Final[str] = "utf-8"


def is_text(data: bytes) -> bool:
    """Return ``True`` when ``data`` looks like UTF-8 text.

    Content containing NUL bytes is treated as binary.
    """

    if _NUL in data:
        return False
    try:
        data.decode(_TEXT_ENCODING)
    except UnicodeDecodeError:
        return False
    return True


def lint_bytes(data: bytes) -> list[Finding]:
    """Run every detector over ``data`` and return findings in line order.

    Lines are delimited by ``\\n``; a line ending in ``\\r\\n`` counts as a
    CRLF line. Per line, trailing whitespace is reported before CRLF. The
    file-level checks follow the per-line findings.

    Args:
        data: Raw file content.

    Returns:
        list[Finding]: Detected defects, empty for a clean file.
    """

    if not data:
        return []

    findings: list[Finding] = []
    lines = data.split(_NEWLINE)
    line_count = len(lines)
    for number, raw in enumerate(lines, start=1):
        crlf = number < line_count and raw.endswith(_CARRIAGE_RETURN)
        body = raw[:-1] if crlf else raw
        if body and body[-1] in _TRAILING_BLANKS:
            findings.append(Finding(kind=FindingKind.TRAILING_WHITESPACE, line=number))
        if crlf:
            findings.append(Finding(kind=FindingKind.CRLF_LINE_ENDING, line=number))

    if not data.endswith(_NEWLINE):
        findings.append(Finding(kind=FindingKind.MISSING_FINAL_NEWLINE, line=line_count))
    elif count_trailing_line_breaks(data) > 1:
        findings.append(Finding(kind=FindingKind.TRAILING_BLANK_LINES, line=line_count))
    return findings


def count_trailing_line_breaks(data: bytes) -> int:
    """Return how many ``\\n`` or ``\\r\\n`` terminators end ``data`` consecutively."""

    count = 0
    end = len(data)
    while end and data[end - 1 : end] == _NEWLINE:
        end -= 1
        if end and data[end - 1 : end] == _CARRIAGE_RETURN:
            end -= 1
        count += 1
    return count


def lint_file(path: Path) -> FileOutcome:
    """Read ``path`` once and lint its content.

    Args:
        path: File to lint.

    Returns:
        FileOutcome: Findings for text files, or a recoverable error when the
        file cannot be read or is not text.
    """

    try:
        data = path.read_bytes()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        return FileOutcome(error=FileError(kind=FileErrorKind.UNREADABLE, message=f"failed to read file: {reason}"))
    if not is_text(data):
        return FileOutcome(error=FileError(kind=FileErrorKind.NOT_TEXT, message="not a valid UTF-8 text file"))
    return FileOutcome(findings=tuple(lint_bytes(data)))


__all__ = ["count_trailing_line_breaks", "is_text", "lint_bytes", "lint_file"]
