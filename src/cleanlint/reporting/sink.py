# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deliver rendered reports to standard output or a file."""

from __future__ import annotations

from pathlib import Path
from typing import Final

import typer

from ..errors import SinkError

STDOUT_DESTINATION: Final[str] = "<stdout>"


def write_output(payload: bytes, destination: Path | None = None) -> None:
    """Write ``payload`` verbatim to ``destination`` or standard output.

    Args:
        payload: Encoded report.
        destination: Target file, or ``None`` for standard output. Existing
            files are overwritten.

    Raises:
        SinkError: If ``destination`` is a directory or cannot be written.
    """

    if destination is None:
        _write_stdout(payload)
        return
    if destination.is_dir():
        raise SinkError(f"output path {destination} is a directory", destination=str(destination))
    try:
        destination.write_bytes(payload)
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise SinkError(f"cannot write {destination}: {reason}", destination=str(destination)) from exc


def _write_stdout(payload: bytes) -> None:
    """Write ``payload`` to the binary standard output stream."""

    try:
        typer.echo(payload, nl=False)
    except OSError as exc:
        raise SinkError(f"cannot write report to standard output: {exc}", destination=STDOUT_DESTINATION) from exc


__all__ = ["STDOUT_DESTINATION", "write_output"]
