# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filesystem traversal producing the ordered set of files to lint."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from .git import NotApplicable, TrackedDecision, TrackedPaths
from .rules import IgnoreMatcher

LOGGER = logging.getLogger(__name__)

# Names skipped whether they are directories or files (worktrees and
# submodules use a ``.git`` file).
ALWAYS_EXCLUDE_NAMES: Final[frozenset[str]] = frozenset({".git"})


@dataclass(frozen=True, slots=True)
class CandidateFile:
    """File selected for linting.

    Attributes:
        path: Filesystem path used to open the file (root joined with ``relative``).
        relative: POSIX path relative to the root, used for matching.
    """

    path: Path
    relative: str


@dataclass(frozen=True, slots=True)
class UnlistableDirectory:
    """Directory whose entries could not be enumerated.

    Attributes:
        path: Filesystem path of the directory.
        relative: POSIX path relative to the root (``""`` for the root itself).
        reason: Operating system error description.
    """

    path: Path
    relative: str
    reason: str


WalkEntry = CandidateFile | UnlistableDirectory


@dataclass(slots=True)
class WalkContext:
    """Parameters and collected listing failures for a single root."""

    root: Path
    matcher: IgnoreMatcher
    decision: TrackedDecision
    failures: list[UnlistableDirectory] = field(default_factory=list)

    def record_failure(self, error: OSError) -> None:
        """Remember a directory that ``os.walk`` could not list."""

        location = Path(error.filename) if error.filename is not None else self.root
        try:
            relative = _relative_posix(location, self.root)
        except ValueError:
            relative = location.as_posix()
        reason = error.strerror or str(error)
        LOGGER.debug("unlistable directory=%s reason=%s", location, reason)
        self.failures.append(UnlistableDirectory(path=location, relative=relative, reason=reason))


class DirectoryWalker:
    """Enumerate candidate files under roots in a deterministic order.

    Symbolic links to directories are never descended. A symbolic link to a
    regular file is treated as that file; dangling links are skipped.
    Directories that cannot be listed are yielded as
    :class:`UnlistableDirectory` entries in path order.
    """

    def walk(
        self,
        roots: Sequence[Path],
        matcher: IgnoreMatcher,
        decisions: Mapping[Path, TrackedDecision],
    ) -> Iterator[WalkEntry]:
        """Yield walk entries for every root in the order supplied.

        Args:
            roots: Root directories to traverse.
            matcher: Compiled ignore patterns applied to root-relative paths.
            decisions: Tracked-file decision per root; missing entries mean
                tracked filtering is disabled.

        Yields:
            WalkEntry: Files and unlistable directories sorted by relative
            path within each root.
        """

        for root in roots:
            context = WalkContext(root=root, matcher=matcher, decision=decisions.get(root, NotApplicable()))
            yield from self.walk_root(context)

    def walk_root(self, context: WalkContext) -> Iterator[WalkEntry]:
        """Yield walk entries beneath ``context.root`` sorted by relative path."""

        entries: list[WalkEntry] = list(self._collect(context))
        entries.extend(failure for failure in context.failures if self._is_relevant_failure(failure, context))
        entries.sort(key=lambda entry: entry.relative)
        LOGGER.debug("root=%s entries=%d unlistable=%d", context.root, len(entries), len(context.failures))
        yield from entries

    def _collect(self, context: WalkContext) -> Iterator[CandidateFile]:
        """Yield unsorted candidate files beneath ``context.root``."""

        for dirpath, dirnames, filenames in os.walk(context.root, onerror=context.record_failure, followlinks=False):
            current = Path(dirpath)
            relative_dir = _relative_posix(current, context.root)
            dirnames[:] = [
                name for name in dirnames if not self._should_skip_directory(_join(relative_dir, name), name, context)
            ]
            for filename in filenames:
                if filename in ALWAYS_EXCLUDE_NAMES:
                    continue
                candidate = current / filename
                relative = _join(relative_dir, filename)
                if self._is_excluded(relative, context):
                    continue
                if not candidate.is_file():
                    continue
                yield CandidateFile(path=candidate, relative=relative)

    def _should_skip_directory(self, relative: str, name: str, context: WalkContext) -> bool:
        """Return whether the directory at ``relative`` should not be traversed."""

        if name in ALWAYS_EXCLUDE_NAMES:
            return True
        if context.matcher.matches_directory(relative):
            LOGGER.debug("pruned directory=%s", relative)
            return True
        return False

    def _is_excluded(self, relative: str, context: WalkContext) -> bool:
        """Return whether the file at ``relative`` is filtered out."""

        if context.matcher.matches(relative):
            return True
        if isinstance(context.decision, TrackedPaths):
            return relative not in context.decision
        return False

    def _is_relevant_failure(self, failure: UnlistableDirectory, context: WalkContext) -> bool:
        """Return whether ``failure`` may hide files that would have been linted.

        Under tracked-only filtering a directory without tracked files below it
        cannot contribute candidates, so its listing failure is ignored.
        """

        if not isinstance(context.decision, TrackedPaths) or not failure.relative:
            return True
        prefix = f"{failure.relative}/"
        return any(path.startswith(prefix) for path in context.decision.paths)


def _relative_posix(path: Path, root: Path) -> str:
    """Return ``path`` relative to ``root`` in POSIX form (``""`` for the root itself)."""

    relative = path.relative_to(root).as_posix()
    return "" if relative == "." else relative


def _join(relative_dir: str, name: str) -> str:
    """Join a POSIX directory prefix and an entry name."""

    return f"{relative_dir}/{name}" if relative_dir else name


__all__ = [
    "ALWAYS_EXCLUDE_NAMES",
    "CandidateFile",
    "DirectoryWalker",
    "UnlistableDirectory",
    "WalkContext",
    "WalkEntry",
]
