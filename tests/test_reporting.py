# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for report rendering and output delivery."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from cleanlint.aggregation import ResultAggregator
from cleanlint.config import OutputFormat
from cleanlint.errors import SinkError
from cleanlint.models import FileError, FileErrorKind, FileOutcome, Finding, FindingKind, Report
from cleanlint.reporting import build_payload, render_report, write_output


def _sample_report() -> Report:
    aggregator = ResultAggregator()
    aggregator.add(
        "src/b.txt",
        FileOutcome(
            findings=(
                Finding(kind=FindingKind.TRAILING_WHITESPACE, line=2),
                Finding(kind=FindingKind.MISSING_FINAL_NEWLINE, line=3),
            )
        ),
    )
    aggregator.add("src/clean.txt", FileOutcome())
    aggregator.add(
        "a.bin",
        FileOutcome(error=FileError(kind=FileErrorKind.NOT_TEXT, message="not a valid UTF-8 text file")),
    )
    aggregator.add("a.txt", FileOutcome(findings=(Finding(kind=FindingKind.CRLF_LINE_ENDING, line=1),)))
    return aggregator.finalize()


def test_aggregator_keeps_only_files_with_issues() -> None:
    report = _sample_report()

    assert report.files_scanned == 4
    assert [entry.path for entry in report.entries] == ["src/b.txt", "a.bin", "a.txt"]
    assert report.finding_count == 3
    assert report.error_count == 1
    assert not report.clean
    assert int(report.exit_code) == 1


def test_json_payload_shape() -> None:
    document = json.loads(render_report(_sample_report(), OutputFormat.JSON))

    assert document == {
        "summary": {"files_scanned": 4, "files_with_issues": 3, "issues": 3, "errors": 1, "clean": False},
        "files": {
            "src/b.txt": [
                {"kind": "trailing_whitespace", "line": 2},
                {"kind": "missing_final_newline", "line": 3},
            ],
            "a.txt": [{"kind": "crlf_line_ending", "line": 1}],
        },
        "errors": {"a.bin": {"kind": "not_text", "message": "not a valid UTF-8 text file"}},
    }
    assert list(document["files"]) == ["src/b.txt", "a.txt"]


def test_empty_run_renders_empty_mapping() -> None:
    report = ResultAggregator().finalize()

    document = json.loads(render_report(report, OutputFormat.JSON))

    assert document["files"] == {}
    assert document["summary"]["clean"] is True
    assert int(report.exit_code) == 0


def test_yaml_matches_payload() -> None:
    report = _sample_report()

    rendered = render_report(report, OutputFormat.YAML)

    assert yaml.safe_load(rendered) == build_payload(report)
    assert rendered.decode().startswith("summary:\n")


def test_rendering_is_deterministic() -> None:
    for fmt in OutputFormat:
        assert render_report(_sample_report(), fmt) == render_report(_sample_report(), fmt)


def test_human_output_lists_findings_then_summary() -> None:
    lines = render_report(_sample_report(), OutputFormat.HUMAN).decode().splitlines()

    assert lines == [
        "src/b.txt:2 Trailing whitespace",
        "src/b.txt:3 Missing newline at end of file",
        "a.bin:- skipped: not a valid UTF-8 text file",
        "a.txt:1 CRLF line ending",
        "4 files scanned, 3 with issues: FAIL",
    ]


def test_human_output_for_clean_run() -> None:
    aggregator = ResultAggregator()
    aggregator.add("a.txt", FileOutcome())

    assert render_report(aggregator.finalize(), OutputFormat.HUMAN) == b"No issues found (1 files scanned).\n"


def test_write_output_to_file_overwrites(tmp_path: Path) -> None:
    target = tmp_path / "report.json"
    target.write_text("stale", encoding="utf-8")

    write_output(b'{"ok": true}\n', target)

    assert target.read_bytes() == b'{"ok": true}\n'


def test_write_output_to_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(SinkError, match="is a directory") as excinfo:
        write_output(b"data", tmp_path)

    assert excinfo.value.destination == str(tmp_path)


def test_write_output_to_missing_parent_fails(tmp_path: Path) -> None:
    with pytest.raises(SinkError, match="cannot write"):
        write_output(b"data", tmp_path / "missing" / "report.txt")


def test_write_output_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    write_output(b"hello\n")

    assert capsys.readouterr().out == "hello\n"


def test_non_utf8_path_is_escaped_in_every_format() -> None:
    name = "caf\udce9.txt"
    aggregator = ResultAggregator()
    aggregator.add(name, FileOutcome(findings=(Finding(kind=FindingKind.TRAILING_WHITESPACE, line=1),)))
    report = aggregator.finalize()

    document = json.loads(render_report(report, OutputFormat.JSON))
    human = render_report(report, OutputFormat.HUMAN)

    assert list(document["files"]) == [name]
    assert human.startswith(b"caf\\udce9.txt:1 Trailing whitespace\n")
    assert list(yaml.safe_load(render_report(report, OutputFormat.YAML))["files"]) == [name]
