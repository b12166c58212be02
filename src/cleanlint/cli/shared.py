# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for the CLI (logging adapters and errors)."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Final

from rich.console import Console
from rich.text import Text

from ..console import detect_tty, get_console_manager
from ..models import ExitCode

PACKAGE_LOGGER_NAME: Final[str] = "cleanlint"

# Message prefix and colour per severity.
_OK_STYLE: Final[tuple[str, str]] = ("✅ ", "green")
_WARN_STYLE: Final[tuple[str, str]] = ("⚠️ ", "yellow")
_FAIL_STYLE: Final[tuple[str, str]] = ("❌ ", "red")


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = ExitCode.ERROR) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Write diagnostics to the stderr console honouring emoji and colour settings."""

    console: Console
    use_emoji: bool
    debug_enabled: bool = False
    use_color: bool = False
    _key_value_re: re.Pattern[str] = re.compile(r"([\w-]+)=(\".*?\"|\S+)")

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences.

        Args:
            message: Text describing the failure state.
        """

        self._emit(message, _FAIL_STYLE)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences.

        Args:
            message: Text describing the warning condition.
        """

        self._emit(message, _WARN_STYLE)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        self._emit(message, _OK_STYLE)

    def _emit(self, message: str, severity: tuple[str, str]) -> None:
        """Print ``message`` with the emoji prefix and colour of ``severity``."""

        prefix, style = severity
        text = Text(f"{prefix}{message}" if self.use_emoji else message)
        if self.use_color:
            text.stylize(style)
        self.console.print(text)

    def debug(self, message: str) -> None:
        """Emit a debug message when debug logging is enabled.

        Args:
            message: Debug payload; ``key=value`` pairs are highlighted.
        """

        if not self.debug_enabled:
            return
        text = Text("[debug] ", style="bold cyan")
        cursor = 0
        for match in self._key_value_re.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            text.append(match.group(1), style="bold magenta")
            text.append("=", style="dim")
            text.append(match.group(2), style="bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)


def build_cli_logger(*, emoji: bool, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided emoji preference.

    Args:
        emoji: Whether log output may include emoji glyphs.
        debug: Whether debug logging should be enabled.

    Returns:
        CLILogger: Logger bound to the shared stderr console.
    """

    use_color = detect_tty()
    console = get_console_manager().get(color=use_color, emoji=emoji)
    return CLILogger(console=console, use_emoji=emoji, debug_enabled=debug, use_color=use_color)


class CLILogHandler(logging.Handler):
    """Forward standard library log records to a :class:`CLILogger`."""

    def __init__(self, logger: CLILogger) -> None:
        super().__init__(level=logging.DEBUG if logger.debug_enabled else logging.WARNING)
        self._logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        """Route ``record`` to the matching CLI logger method."""

        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            self.handleError(record)
            return
        if record.levelno >= logging.ERROR:
            self._logger.fail(message)
        elif record.levelno >= logging.WARNING:
            self._logger.warn(message)
        else:
            self._logger.debug(message)


@contextmanager
def forward_package_logs(logger: CLILogger) -> Iterator[None]:
    """Attach a :class:`CLILogHandler` to the package logger for the duration of a command.

    Args:
        logger: CLI logger receiving forwarded records.

    Yields:
        None: Control returns to the caller with forwarding active.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    handler = CLILogHandler(logger)
    previous_level = package_logger.level
    previous_propagate = package_logger.propagate
    package_logger.addHandler(handler)
    package_logger.setLevel(handler.level)
    package_logger.propagate = False
    try:
        yield
    finally:
        package_logger.removeHandler(handler)
        package_logger.setLevel(previous_level)
        package_logger.propagate = previous_propagate


__all__ = [
    "CLIError",
    "CLILogHandler",
    "CLILogger",
    "PACKAGE_LOGGER_NAME",
    "build_cli_logger",
    "forward_package_logs",
]
