# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render lint reports as JSON, YAML or human-readable text."""

from __future__ import annotations

import json
from typing import Final

import yaml

from ..config import OutputFormat
from ..models import FileResult, Finding, Report

_ENCODING: Final[str] = "utf-8"
# Paths that are not valid UTF-8 carry surrogate escapes; emit them as \uXXXX.
_ENCODING_ERRORS: Final[str] = "backslashreplace"
_NO_LINE: Final[str] = "-"

JSONValue = str | int | bool | None | list["JSONValue"] | dict[str, "JSONValue"]


def build_payload(report: Report) -> dict[str, JSONValue]:
    """Return the structured document shared by the JSON and YAML encoders.

    Args:
        report: Finalised lint report.

    Returns:
        dict[str, JSONValue]: Mapping with ``summary``, ``files`` and ``errors``
        sections. ``files`` and ``errors`` preserve walk order.
    """

    files: dict[str, JSONValue] = {}
    errors: dict[str, JSONValue] = {}
    for entry in report.entries:
        if entry.findings:
            files[entry.path] = [_serialize_finding(finding) for finding in entry.findings]
        if entry.error is not None:
            errors[entry.path] = {"kind": entry.error.kind.value, "message": entry.error.message}
    summary: dict[str, JSONValue] = {
        "files_scanned": report.files_scanned,
        "files_with_issues": report.files_with_issues,
        "issues": report.finding_count,
        "errors": report.error_count,
        "clean": report.clean,
    }
    return {"summary": summary, "files": files, "errors": errors}


def _serialize_finding(finding: Finding) -> dict[str, JSONValue]:
    """Return the serialisable mapping for ``finding``."""

    return {"kind": finding.kind.value, "line": finding.line}


def render_json(report: Report) -> bytes:
    """Encode ``report`` as indented JSON terminated by a newline."""

    text = json.dumps(build_payload(report), indent=2, ensure_ascii=False) + "\n"
    return text.encode(_ENCODING, _ENCODING_ERRORS)


def render_yaml(report: Report) -> bytes:
    """Encode ``report`` as block-style YAML."""

    text = yaml.safe_dump(
        build_payload(report),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return text.encode(_ENCODING, _ENCODING_ERRORS)


def render_human(report: Report) -> bytes:
    """Encode ``report`` as one line per finding followed by a summary line."""

    if report.clean:
        return f"No issues found ({report.files_scanned} files scanned).\n".encode(_ENCODING, _ENCODING_ERRORS)
    lines: list[str] = []
    for entry in report.entries:
        lines.extend(_human_lines(entry))
    lines.append(f"{report.files_scanned} files scanned, {report.files_with_issues} with issues: FAIL")
    return ("\n".join(lines) + "\n").encode(_ENCODING, _ENCODING_ERRORS)


def _human_lines(entry: FileResult) -> list[str]:
    """Return the human-readable lines describing ``entry``."""

    lines = [
        f"{entry.path}:{finding.line if finding.line is not None else _NO_LINE} {finding.kind.description}"
        for finding in entry.findings
    ]
    if entry.error is not None:
        lines.append(f"{entry.path}:{_NO_LINE} skipped: {entry.error.message}")
    return lines


def render_report(report: Report, fmt: OutputFormat) -> bytes:
    """Encode ``report`` in the requested output format.

    Args:
        report: Finalised lint report.
        fmt: Requested encoding.

    Returns:
        bytes: UTF-8 encoded document, identical across runs for identical input.

    Raises:
        ValueError: If ``fmt`` is not a recognised output format.
    """

    if fmt is OutputFormat.JSON:
        return render_json(report)
    if fmt is OutputFormat.YAML:
        return render_yaml(report)
    if fmt is OutputFormat.HUMAN:
        return render_human(report)
    raise ValueError(f"unsupported output format: {fmt!r}")


__all__ = ["build_payload", "render_human", "render_json", "render_report", "render_yaml"]
