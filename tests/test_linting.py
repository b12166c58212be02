# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the whitespace and line-ending detectors."""

from __future__ import annotations

from pathlib import Path

import pytest

from cleanlint.linting import count_trailing_line_breaks, is_text, lint_bytes, lint_file
from cleanlint.models import FileErrorKind, FindingKind


def _pairs(data: bytes) -> list[tuple[FindingKind, int | None]]:
    return [(finding.kind, finding.line) for finding in lint_bytes(data)]


@pytest.mark.parametrize("data", [b"", b"hello\n", b"a\nb\n", b"\n", b"x\n  y\n"])
def test_clean_content_has_no_findings(data: bytes) -> None:
    assert lint_bytes(data) == []


def test_trailing_space_and_tab_reported_per_line() -> None:
    assert _pairs(b"ok\nspace \ntab\t\n") == [
        (FindingKind.TRAILING_WHITESPACE, 2),
        (FindingKind.TRAILING_WHITESPACE, 3),
    ]


def test_whitespace_only_line_counts_as_trailing_whitespace() -> None:
    assert _pairs(b"a\n   \nb\n") == [(FindingKind.TRAILING_WHITESPACE, 2)]


def test_missing_final_newline_reported_on_last_line() -> None:
    assert _pairs(b"hello") == [(FindingKind.MISSING_FINAL_NEWLINE, 1)]
    assert _pairs(b"a\nb\nc") == [(FindingKind.MISSING_FINAL_NEWLINE, 3)]


def test_trailing_whitespace_at_eof_precedes_missing_newline() -> None:
    assert _pairs(b"a  ") == [
        (FindingKind.TRAILING_WHITESPACE, 1),
        (FindingKind.MISSING_FINAL_NEWLINE, 1),
    ]


def test_crlf_reported_once_per_line() -> None:
    assert _pairs(b"a\r\nb\r\nc\n") == [
        (FindingKind.CRLF_LINE_ENDING, 1),
        (FindingKind.CRLF_LINE_ENDING, 2),
    ]


def test_single_crlf_terminator_is_not_a_trailing_blank_line() -> None:
    assert _pairs(b"a\r\n") == [(FindingKind.CRLF_LINE_ENDING, 1)]


def test_whitespace_before_crlf_is_trailing_whitespace() -> None:
    assert _pairs(b"a \r\n") == [
        (FindingKind.TRAILING_WHITESPACE, 1),
        (FindingKind.CRLF_LINE_ENDING, 1),
    ]


def test_lone_carriage_return_at_eof_is_missing_newline() -> None:
    assert _pairs(b"a\r") == [(FindingKind.MISSING_FINAL_NEWLINE, 1)]


@pytest.mark.parametrize(
    ("data", "line"),
    [
        (b"a\n\n", 3),
        (b"foo\n\n\n", 4),
        (b"\n\n", 3),
    ],
)
def test_trailing_blank_lines_reported_once(data: bytes, line: int) -> None:
    assert _pairs(data) == [(FindingKind.TRAILING_BLANK_LINES, line)]


def test_trailing_blank_lines_with_crlf() -> None:
    assert _pairs(b"a\r\n\r\n") == [
        (FindingKind.CRLF_LINE_ENDING, 1),
        (FindingKind.CRLF_LINE_ENDING, 2),
        (FindingKind.TRAILING_BLANK_LINES, 3),
    ]


def test_count_trailing_line_breaks_mixes_terminators() -> None:
    assert count_trailing_line_breaks(b"a\n\r\n\n") == 3
    assert count_trailing_line_breaks(b"a\r\n") == 1
    assert count_trailing_line_breaks(b"a") == 0


def test_is_text_rejects_nul_and_invalid_utf8() -> None:
    assert is_text("naïve\n".encode())
    assert not is_text(b"abc\0def")
    assert not is_text(b"\xff\xfe\n")


def test_lint_file_returns_findings(tmp_path: Path) -> None:
    target = tmp_path / "a.txt"
    target.write_bytes(b"x \n")

    outcome = lint_file(target)

    assert outcome.error is None
    assert [finding.kind for finding in outcome.findings] == [FindingKind.TRAILING_WHITESPACE]
    assert not outcome.ok


def test_lint_file_flags_binary_content(tmp_path: Path) -> None:
    target = tmp_path / "blob.bin"
    target.write_bytes(b"\x00\x01\x02trailing \n")

    outcome = lint_file(target)

    assert outcome.findings == ()
    assert outcome.error is not None
    assert outcome.error.kind is FileErrorKind.NOT_TEXT


def test_lint_file_reports_unreadable_path(tmp_path: Path) -> None:
    outcome = lint_file(tmp_path)

    assert outcome.error is not None
    assert outcome.error.kind is FileErrorKind.UNREADABLE
    assert outcome.error.message.startswith("failed to read file")
