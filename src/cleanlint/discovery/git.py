# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Git-backed resolution of the tracked file set for a root."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

from ..config import TrackedMode
from ..errors import ConfigError
from ..process import CommandOptions, SubprocessExecutionError, run_command

LOGGER = logging.getLogger(__name__)

GitRunner = Callable[[Sequence[str], Path], CompletedProcess[bytes]]

# git prints this when no repository exists at or above the working directory.
NOT_A_REPOSITORY_MARKER: Final[str] = "not a git repository"


@dataclass(frozen=True, slots=True)
class NotApplicable:
    """Tracked-only filtering is disabled for the root."""


@dataclass(frozen=True, slots=True)
class TrackedPaths:
    """Tracked-only filtering is active; ``paths`` are POSIX paths relative to the root."""

    paths: frozenset[str]

    def __contains__(self, relative_path: object) -> bool:
        """Return whether ``relative_path`` is tracked."""

        return relative_path in self.paths


TrackedDecision = NotApplicable | TrackedPaths


def _default_runner(cmd: Sequence[str], root: Path) -> CompletedProcess[bytes]:
    """Execute a git query in ``root`` raising on non-zero exit.

    Output is captured as bytes and messages are forced to the C locale so
    that error text can be recognised.

    Args:
        cmd: Git command to execute.
        root: Directory used as the working directory.

    Returns:
        CompletedProcess[bytes]: Completed process with raw captured output.
    """

    env = {**os.environ, "LC_ALL": "C"}
    return run_command(cmd, options=CommandOptions(cwd=root, env=env, check=True, text=False))


def _decode_paths(output: bytes) -> frozenset[str]:
    """Split NUL-separated git output into paths decoded like ``os.walk`` names."""

    return frozenset(os.fsdecode(entry) for entry in output.split(b"\0") if entry)


class TrackedSetResolver:
    """Decide per root whether file selection is limited to git-tracked files."""

    def __init__(self, *, runner: GitRunner | None = None) -> None:
        """Create a resolver.

        Args:
            runner: Optional command runner used to execute git commands. It
                must return byte output, raise :class:`SubprocessExecutionError`
                on failure and :class:`FileNotFoundError` when git is unavailable.
        """

        self._runner = runner or _default_runner

    def resolve(self, root: Path, mode: TrackedMode) -> TrackedDecision:
        """Return the tracked-file decision for ``root``.

        Args:
            root: Directory being linted.
            mode: Tracked mode requested by the caller.

        Returns:
            TrackedDecision: ``NotApplicable`` or the tracked path set.

        Raises:
            ConfigError: If git tracking is forced but no repository is found,
                or when git fails for any other reason.
        """

        if mode is TrackedMode.FORCE_OFF:
            return NotApplicable()
        in_repo = self.is_inside_work_tree(root)
        if not in_repo:
            if mode is TrackedMode.FORCE_ON:
                raise ConfigError(f"git required but not found: {root} is not inside a git working tree")
            LOGGER.debug("root=%s tracked=off reason=no-repository", root)
            return NotApplicable()
        paths = self.list_tracked(root)
        LOGGER.debug("root=%s tracked=on files=%d", root, len(paths))
        return TrackedPaths(paths=paths)

    def is_inside_work_tree(self, root: Path) -> bool:
        """Return whether ``root`` lies at or below a git working tree.

        Args:
            root: Directory to inspect.

        Returns:
            bool: ``True`` when git reports a working tree for ``root``;
            ``False`` when git is missing or reports that no repository exists.

        Raises:
            ConfigError: When git fails for another reason, such as a corrupt
                ``.git`` entry.
        """

        try:
            completed = self._runner(["git", "rev-parse", "--is-inside-work-tree"], root)
        except FileNotFoundError:
            LOGGER.debug("git executable not available")
            return False
        except SubprocessExecutionError as exc:
            if NOT_A_REPOSITORY_MARKER in (exc.stderr or "").lower():
                return False
            raise ConfigError(f"git failed while inspecting {root}: {exc}") from exc
        return os.fsdecode(completed.stdout or b"").strip() == "true"

    def list_tracked(self, root: Path) -> frozenset[str]:
        """Return paths tracked by git beneath ``root``, relative to ``root``.

        Args:
            root: Directory inside a git working tree.

        Returns:
            frozenset[str]: Tracked POSIX paths relative to ``root``; names
            that are not valid UTF-8 keep their bytes as surrogate escapes.

        Raises:
            ConfigError: When ``git ls-files`` fails.
        """

        try:
            completed = self._runner(["git", "ls-files", "-z", "--cached"], root)
        except (FileNotFoundError, SubprocessExecutionError) as exc:
            raise ConfigError(f"failed to list git tracked files in {root}: {exc}") from exc
        return _decode_paths(completed.stdout or b"")


__all__ = ["GitRunner", "NotApplicable", "TrackedDecision", "TrackedPaths", "TrackedSetResolver"]
