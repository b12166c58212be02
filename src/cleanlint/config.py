# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models describing a single lint run."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TrackedMode(str, Enum):
    """Tri-state switch controlling git-tracked-only file selection."""

    UNSET = "unset"
    FORCE_ON = "on"
    FORCE_OFF = "off"

    @classmethod
    def from_flag(cls, value: bool | None) -> TrackedMode:
        """Map an optional boolean CLI flag onto a tracked mode.

        Args:
            value: ``None`` when the flag was omitted, otherwise its value.

        Returns:
            TrackedMode: Corresponding tracked mode.
        """

        if value is None:
            return cls.UNSET
        return cls.FORCE_ON if value else cls.FORCE_OFF


class OutputFormat(str, Enum):
    """Closed set of report encodings."""

    JSON = "json"
    YAML = "yaml"
    HUMAN = "human"


class DiscoveryConfig(BaseModel):
    """Configuration for how to discover and filter files within the roots."""

    model_config = ConfigDict(validate_assignment=True)

    roots: list[Path] = Field(default_factory=lambda: [Path(".")])
    ignore_patterns: list[str] = Field(default_factory=list)
    tracked_mode: TrackedMode = TrackedMode.UNSET

    @field_validator("roots")
    @classmethod
    def _default_roots(cls, value: list[Path]) -> list[Path]:
        """Fall back to the current directory when no roots are supplied."""

        return value or [Path(".")]

    @field_validator("ignore_patterns")
    @classmethod
    def _strip_patterns(cls, value: list[str]) -> list[str]:
        """Strip leading whitespace and drop blank patterns, preserving order.

        Trailing whitespace is left to gitignore rules, where an escaped
        trailing space (``foo\\ ``) is significant.
        """

        return [entry.lstrip() for entry in value if entry and not entry.isspace()]


class OutputConfig(BaseModel):
    """Configuration for controlling report encoding and destination."""

    model_config = ConfigDict(validate_assignment=True)

    format: OutputFormat = OutputFormat.HUMAN
    output_path: Path | None = None
    emoji: bool = True
    verbose: bool = False


class LintConfig(BaseModel):
    """Top-level configuration aggregating discovery and output settings."""

    model_config = ConfigDict(validate_assignment=True)

    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


__all__ = ["DiscoveryConfig", "LintConfig", "OutputConfig", "OutputFormat", "TrackedMode"]
