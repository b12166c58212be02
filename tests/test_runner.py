# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the end-to-end lint pipeline."""

from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from cleanlint.config import DiscoveryConfig, LintConfig, TrackedMode
from cleanlint.discovery import DirectoryWalker
from cleanlint.errors import ConfigError
from cleanlint.models import FileError, FileErrorKind, FindingKind
from cleanlint.runner import prepare_run, run_lint


def _config(*roots: Path, patterns: tuple[str, ...] = (), mode: TrackedMode = TrackedMode.FORCE_OFF) -> LintConfig:
    return LintConfig(discovery=DiscoveryConfig(roots=list(roots), ignore_patterns=list(patterns), tracked_mode=mode))


class ExplodingWalker(DirectoryWalker):
    """Walker failing the test when traversal starts."""

    def walk(self, roots, matcher, decisions):  # type: ignore[override]
        raise AssertionError("traversal must not start")


def test_report_collects_findings_in_walk_order(tmp_path: Path, make_tree) -> None:
    make_tree(tmp_path, {"b.txt": b"b \n", "a.txt": b"a", "ok.txt": b"fine\n"})

    report = run_lint(_config(tmp_path))

    assert report.files_scanned == 3
    assert [entry.path for entry in report.entries] == [str(tmp_path / "a.txt"), str(tmp_path / "b.txt")]
    assert report.entries[0].findings[0].kind is FindingKind.MISSING_FINAL_NEWLINE
    assert report.entries[1].findings[0].kind is FindingKind.TRAILING_WHITESPACE


def test_ignored_files_are_not_linted(tmp_path: Path, make_tree) -> None:
    make_tree(tmp_path, {"notes.md": b"dirty \n", "main.txt": b"clean\n"})

    report = run_lint(_config(tmp_path, patterns=("*.md",)))

    assert report.clean
    assert report.files_scanned == 1


def test_binary_file_recorded_without_aborting(tmp_path: Path, make_tree) -> None:
    make_tree(tmp_path, {"a.bin": b"\x00\x01", "b.txt": b"trail \n"})
    seen: list[tuple[str, FileError]] = []

    report = run_lint(_config(tmp_path), on_file_error=lambda path, error: seen.append((path, error)))

    assert report.files_scanned == 2
    assert report.error_count == 1
    assert report.finding_count == 1
    assert [(path, error.kind) for path, error in seen] == [(str(tmp_path / "a.bin"), FileErrorKind.NOT_TEXT)]
    assert int(report.exit_code) == 1


def test_empty_directory_is_clean(tmp_path: Path) -> None:
    report = run_lint(_config(tmp_path))

    assert report.clean
    assert report.files_scanned == 0


def test_missing_root_fails_before_traversal(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Directory not found"):
        run_lint(_config(tmp_path, tmp_path / "missing"), walker=ExplodingWalker())


def test_file_root_is_rejected(tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Not a directory"):
        prepare_run(_config(target))


def test_invalid_pattern_fails_before_traversal(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid ignore pattern"):
        run_lint(_config(tmp_path, patterns=("[invalid",)), walker=ExplodingWalker())


def test_blank_patterns_are_dropped(tmp_path: Path) -> None:
    config = _config(tmp_path, patterns=("  *.md ", "", "   "))

    assert config.discovery.ignore_patterns == ["*.md "]
    assert prepare_run(config).matcher.matches("docs/a.md")


def test_escaped_trailing_space_is_kept(tmp_path: Path) -> None:
    config = _config(tmp_path, patterns=("foo\\ ",))

    assert config.discovery.ignore_patterns == ["foo\\ "]
    matcher = prepare_run(config).matcher
    assert matcher.matches("foo ")
    assert not matcher.matches("foo")


def test_unlistable_directory_is_an_unreadable_error(tmp_path: Path, make_tree, locked_walk: str) -> None:
    make_tree(tmp_path, {"ok.txt": b"fine\n", "locked/inner.txt": b"x\n"})

    report = run_lint(_config(tmp_path))

    assert report.files_scanned == 1
    assert report.finding_count == 0
    assert report.error_count == 1
    assert report.exit_code == 1
    [entry] = report.entries
    assert entry.path == str(tmp_path / "locked")
    assert entry.error == FileError(kind=FileErrorKind.UNREADABLE, message="cannot list directory: Permission denied")


def test_tracked_mode_limits_to_git_files(git_repo: Path, make_tree) -> None:
    make_tree(git_repo, {"tracked.txt": b"dirty \n", "untracked.txt": b"dirty \n"})
    subprocess.run(["git", "add", "tracked.txt"], cwd=git_repo, check=True, capture_output=True)

    tracked = run_lint(_config(git_repo, mode=TrackedMode.UNSET))
    everything = run_lint(_config(git_repo, mode=TrackedMode.FORCE_OFF))

    assert [entry.path for entry in tracked.entries] == [str(git_repo / "tracked.txt")]
    assert everything.files_scanned == 2
