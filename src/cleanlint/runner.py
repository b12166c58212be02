# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Execution helpers wiring discovery, linting and aggregation together."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .aggregation import ResultAggregator
from .config import LintConfig
from .discovery import (
    DirectoryWalker,
    IgnoreMatcher,
    TrackedDecision,
    TrackedSetResolver,
    UnlistableDirectory,
    compile_ignore_patterns,
)
from .errors import ConfigError
from .linting import lint_file
from .models import FileError, FileErrorKind, Report

LOGGER = logging.getLogger(__name__)

FileErrorCallback = Callable[[str, FileError], None]


@dataclass(slots=True)
class PreparedRun:
    """Validated inputs required to lint every root.

    Attributes:
        roots: Existing root directories in the order supplied.
        matcher: Compiled ignore patterns shared by all roots.
        decisions: Tracked-file decision per root.
    """

    roots: list[Path]
    matcher: IgnoreMatcher
    decisions: dict[Path, TrackedDecision] = field(default_factory=dict)


def prepare_run(config: LintConfig, *, resolver: TrackedSetResolver | None = None) -> PreparedRun:
    """Validate ``config`` and resolve everything needed before reading files.

    Args:
        config: Run configuration.
        resolver: Optional tracked-set resolver, primarily for tests.

    Returns:
        PreparedRun: Roots, matcher and tracked decisions.

    Raises:
        ConfigError: If a root is missing, an ignore pattern is invalid or git
            tracking cannot be honoured.
    """

    discovery = config.discovery
    roots = list(discovery.roots)
    for root in roots:
        if not root.exists():
            raise ConfigError(f"Directory not found: {root}")
        if not root.is_dir():
            raise ConfigError(f"Not a directory: {root}")
    matcher = compile_ignore_patterns(discovery.ignore_patterns)
    active_resolver = resolver or TrackedSetResolver()
    decisions = {root: active_resolver.resolve(root, discovery.tracked_mode) for root in roots}
    return PreparedRun(roots=roots, matcher=matcher, decisions=decisions)


def run_lint(
    config: LintConfig,
    *,
    resolver: TrackedSetResolver | None = None,
    walker: DirectoryWalker | None = None,
    on_file_error: FileErrorCallback | None = None,
) -> Report:
    """Lint every file selected by ``config`` and return the aggregated report.

    Args:
        config: Run configuration.
        resolver: Optional tracked-set resolver override.
        walker: Optional directory walker override.
        on_file_error: Callback invoked for each file that could not be linted.

    Returns:
        Report: Findings and per-file errors in walk order.

    Raises:
        ConfigError: Propagated from :func:`prepare_run` before any file is read.
    """

    prepared = prepare_run(config, resolver=resolver)
    active_walker = walker or DirectoryWalker()
    aggregator = ResultAggregator()
    for entry in active_walker.walk(prepared.roots, prepared.matcher, prepared.decisions):
        if isinstance(entry, UnlistableDirectory):
            display = str(entry.path)
            error = FileError(kind=FileErrorKind.UNREADABLE, message=f"cannot list directory: {entry.reason}")
            if on_file_error is not None:
                on_file_error(display, error)
            aggregator.add_error(display, error)
            continue
        display = str(entry.path)
        outcome = lint_file(entry.path)
        if outcome.error is not None:
            LOGGER.debug("file=%s error=%s", display, outcome.error.kind.value)
            if on_file_error is not None:
                on_file_error(display, outcome.error)
        aggregator.add(display, outcome)
    report = aggregator.finalize()
    LOGGER.debug("scanned=%d with_issues=%d", report.files_scanned, report.files_with_issues)
    return report


__all__ = ["FileErrorCallback", "PreparedRun", "prepare_run", "run_lint"]
