# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy for fatal pipeline failures."""

from __future__ import annotations


class CleanlintError(RuntimeError):
    """Base class for errors that abort a lint run."""


class ConfigError(CleanlintError):
    """Raised before traversal when the run configuration cannot be honoured.

    Covers invalid ignore patterns, missing roots, and git tracking requested
    where no repository exists or where git itself fails.
    """


class SinkError(CleanlintError):
    """Raised when the rendered report cannot be written to its destination."""

    def __init__(self, message: str, *, destination: str) -> None:
        """Initialise the error with the destination that failed.

        Args:
            message: Human-readable description of the write failure.
            destination: Path (or ``"<stdout>"``) the report was written to.
        """

        super().__init__(message)
        self.destination = destination


__all__ = ["CleanlintError", "ConfigError", "SinkError"]
