# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shell-free wrapper around ``subprocess`` for read-only git queries."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional; commands are fixed argument lists
# and ``shell=True`` is never used.
import subprocess  # nosec B404
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from subprocess import CompletedProcess
from typing import Any, Final

TIMEOUT_RETURNCODE: Final[int] = 124


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options.

    ``text=False`` keeps captured streams as raw bytes, which callers need
    when the output contains file names that are not valid UTF-8.
    """

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    check: bool = False
    capture_output: bool = True
    text: bool = True
    timeout: float | None = 60.0


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str | None) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            command: Normalised command sequence that was executed.
            returncode: Exit status reported by the subprocess.
            stderr: Captured standard error stream.
        """

        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr


def _ensure_text(value: str | bytes | None) -> str | None:
    """Return ``value`` decoded to text when supplied as ``bytes``."""

    if value is None or isinstance(value, str):
        return value
    return value.decode(errors="replace")


def _normalize_args(args: Sequence[str]) -> list[str]:
    """Resolve the executable of ``args`` against ``PATH``.

    Args:
        args: Raw command arguments supplied by the caller.

    Returns:
        list[str]: Argument list whose head is an absolute executable path.

    Raises:
        ValueError: If no arguments are provided.
        FileNotFoundError: If the executable cannot be found on ``PATH``.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        raise FileNotFoundError(f"Executable '{head}' was not found on PATH")
    return [resolved, *rest]


def run_command(args: Sequence[str], *, options: CommandOptions | None = None) -> CompletedProcess[Any]:
    """Execute ``args`` after normalising the executable path.

    Args:
        args: Command and argument sequence to execute.
        options: Options configuring execution semantics.

    Returns:
        CompletedProcess: Subprocess execution metadata; streams are ``str``
        or ``bytes`` according to ``options.text``.

    Raises:
        FileNotFoundError: If the executable cannot be resolved on ``PATH``.
        SubprocessExecutionError: When ``check`` is true and the process exits
            with a non-zero status.
    """

    normalized = _normalize_args(args)
    resolved_options = options or CommandOptions()

    try:
        completed: CompletedProcess[Any] = subprocess.run(  # nosec B603 - fixed argument lists
            normalized,
            cwd=str(resolved_options.cwd) if resolved_options.cwd is not None else None,
            env=dict(resolved_options.env) if resolved_options.env is not None else None,
            check=False,
            capture_output=resolved_options.capture_output,
            text=resolved_options.text,
            timeout=resolved_options.timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {resolved_options.timeout:.1f}s"
        stdout: str | bytes = (_ensure_text(exc.stdout) or "") if resolved_options.text else (exc.stdout or b"")
        completed = subprocess.CompletedProcess(
            args=list(normalized),
            returncode=TIMEOUT_RETURNCODE,
            stdout=stdout,
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )

    if resolved_options.check and completed.returncode != 0:
        raise SubprocessExecutionError(normalized, completed.returncode, _ensure_text(completed.stderr))

    return completed


__all__ = ["CommandOptions", "SubprocessExecutionError", "run_command"]
