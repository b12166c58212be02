# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import errno
import os
import shutil
import subprocess
from collections.abc import Callable, Mapping
from pathlib import Path

import pytest

TreeFactory = Callable[[Path, Mapping[str, bytes]], None]


def _write_tree(root: Path, files: Mapping[str, bytes]) -> None:
    for relative, content in files.items():
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(content)


@pytest.fixture
def make_tree() -> TreeFactory:
    """Return a helper writing ``{relative_path: bytes}`` mappings beneath a root."""
    return _write_tree


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    """Return an initialised git repository, skipping when git is unavailable."""
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    repo = tmp_path / "repo"
    repo.mkdir()
    subprocess.run(["git", "init", "-q"], cwd=repo, check=True, capture_output=True)
    return repo



@pytest.fixture
def locked_walk(monkeypatch: pytest.MonkeyPatch) -> str:
    """Make directory listing fail with ``EACCES`` for directories named ``locked``."""
    real_walk = os.walk

    def fake_walk(top, topdown=True, onerror=None, followlinks=False):
        for dirpath, dirnames, filenames in real_walk(top, topdown=topdown, followlinks=followlinks):
            if Path(dirpath).name == "locked":
                if onerror is not None:
                    onerror(PermissionError(errno.EACCES, "Permission denied", dirpath))
                dirnames[:] = []
                continue
            yield dirpath, dirnames, filenames

    monkeypatch.setattr("cleanlint.discovery.filesystem.os.walk", fake_walk)
    return "locked"
