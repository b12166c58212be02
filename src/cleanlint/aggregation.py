# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Collect per-file outcomes into an ordered :class:`Report`."""

from __future__ import annotations

from .models import FileError, FileOutcome, FileResult, Report


class ResultAggregator:
    """Accumulate lint outcomes in walk order.

    Only files that produced findings or errors become report entries; clean
    files are counted but otherwise omitted.
    """

    def __init__(self) -> None:
        self._entries: list[FileResult] = []
        self._files_scanned = 0

    @property
    def files_scanned(self) -> int:
        """Return the number of outcomes added so far."""

        return self._files_scanned

    def add(self, path: str, outcome: FileOutcome) -> None:
        """Record ``outcome`` for the file displayed as ``path``.

        Args:
            path: Display path of the linted file.
            outcome: Findings or error produced for the file.
        """

        self._files_scanned += 1
        if outcome.ok:
            return
        self._entries.append(FileResult(path=path, findings=outcome.findings, error=outcome.error))

    def add_error(self, path: str, error: FileError) -> None:
        """Record an error for ``path`` that is not a scanned file, such as an unlistable directory."""

        self._entries.append(FileResult(path=path, error=error))

    def finalize(self) -> Report:
        """Return the immutable report for every outcome added so far."""

        return Report(entries=tuple(self._entries), files_scanned=self._files_scanned)


__all__ = ["ResultAggregator"]
