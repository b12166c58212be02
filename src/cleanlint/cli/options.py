# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typer option declarations and their translation into run configuration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Final

import typer

from ..config import DiscoveryConfig, LintConfig, OutputConfig, OutputFormat, TrackedMode

_TRUE_TOKENS: Final[frozenset[str]] = frozenset({"true", "yes", "on", "1"})
_FALSE_TOKENS: Final[frozenset[str]] = frozenset({"false", "no", "off", "0"})

DIRECTORIES_ARGUMENT = Annotated[
    list[Path] | None,
    typer.Argument(
        metavar="[DIR]...",
        help="Directories to lint (default: current directory).",
        show_default=False,
    ),
]
JSON_OPTION = Annotated[
    bool,
    typer.Option("--json", help="Emit the report as JSON."),
]
YAML_OPTION = Annotated[
    bool,
    typer.Option("--yaml", help="Emit the report as YAML."),
]
IGNORE_OPTION = Annotated[
    list[str] | None,
    typer.Option(
        "--ignore",
        metavar="PATTERN",
        help="Glob pattern of paths to skip, relative to each directory (repeatable).",
        show_default=False,
    ),
]
OUTPUT_OPTION = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        metavar="FILE",
        help="Write the report to FILE instead of standard output.",
        show_default=False,
    ),
]
GIT_OPTION = Annotated[
    str | None,
    typer.Option(
        "--git",
        metavar="[true|false]",
        help="Only lint git-tracked files. Defaults to on inside a repository; bare --git requires one.",
        show_default=False,
    ),
]
EMOJI_OPTION = Annotated[
    bool,
    typer.Option("--emoji/--no-emoji", help="Toggle emoji in diagnostic output."),
]
VERBOSE_OPTION = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Log discovery decisions to standard error."),
]


def normalize_cli_values(values: Sequence[str] | None) -> tuple[str, ...]:
    """Return CLI values without leading whitespace or blank entries, preserving order.

    Trailing whitespace is kept because an escaped trailing space is part of a
    gitignore pattern.
    """

    if not values:
        return ()
    cleaned_values: list[str] = []
    for entry in values:
        if not entry:
            continue
        stripped = entry.lstrip()
        if stripped:
            cleaned_values.append(stripped)
    return tuple(cleaned_values)


def parse_git_flag(value: str | None) -> bool | None:
    """Interpret the ``--git`` option value.

    Args:
        value: Raw option value, ``None`` when the option was omitted.

    Returns:
        bool | None: Parsed flag or ``None`` when omitted.

    Raises:
        typer.BadParameter: If ``value`` is not a recognised boolean literal.
    """

    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in _TRUE_TOKENS:
        return True
    if lowered in _FALSE_TOKENS:
        return False
    raise typer.BadParameter(f"expected true or false, got {value!r}", param_hint="'--git'")


def resolve_output_format(*, json_output: bool, yaml_output: bool) -> OutputFormat:
    """Return the requested report format.

    Raises:
        typer.BadParameter: If both ``--json`` and ``--yaml`` were supplied.
    """

    if json_output and yaml_output:
        raise typer.BadParameter("--json and --yaml are mutually exclusive", param_hint="'--yaml'")
    if json_output:
        return OutputFormat.JSON
    if yaml_output:
        return OutputFormat.YAML
    return OutputFormat.HUMAN


@dataclass(slots=True)
class LintCLIOptions:
    """Capture normalised values supplied to the lint command."""

    directories: tuple[Path, ...]
    ignore_patterns: tuple[str, ...]
    output_format: OutputFormat
    output_path: Path | None
    git: bool | None
    emoji: bool
    verbose: bool

    def to_config(self) -> LintConfig:
        """Return the :class:`LintConfig` described by these options."""

        return LintConfig(
            discovery=DiscoveryConfig(
                roots=list(self.directories),
                ignore_patterns=list(self.ignore_patterns),
                tracked_mode=TrackedMode.from_flag(self.git),
            ),
            output=OutputConfig(
                format=self.output_format,
                output_path=self.output_path,
                emoji=self.emoji,
                verbose=self.verbose,
            ),
        )


def build_lint_options(
    *,
    directories: Sequence[Path] | None,
    json_output: bool,
    yaml_output: bool,
    ignore: Sequence[str] | None,
    output: Path | None,
    git: str | None,
    emoji: bool,
    verbose: bool,
) -> LintCLIOptions:
    """Construct ``LintCLIOptions`` from Typer callback parameters.

    Raises:
        typer.BadParameter: When option values conflict or cannot be parsed.
    """

    return LintCLIOptions(
        directories=tuple(directories or ()),
        ignore_patterns=normalize_cli_values(ignore),
        output_format=resolve_output_format(json_output=json_output, yaml_output=yaml_output),
        output_path=output,
        git=parse_git_flag(git),
        emoji=emoji,
        verbose=verbose,
    )


__all__ = [
    "DIRECTORIES_ARGUMENT",
    "EMOJI_OPTION",
    "GIT_OPTION",
    "IGNORE_OPTION",
    "JSON_OPTION",
    "LintCLIOptions",
    "OUTPUT_OPTION",
    "VERBOSE_OPTION",
    "YAML_OPTION",
    "build_lint_options",
    "normalize_cli_values",
    "parse_git_flag",
    "resolve_output_format",
]
