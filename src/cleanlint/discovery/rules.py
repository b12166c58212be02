# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Compile user-supplied ignore patterns into a path matcher."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import pathspec

from ..errors import ConfigError


@dataclass(frozen=True, slots=True)
class IgnoreMatcher:
    """Decide whether root-relative paths are excluded by ignore patterns.

    Matching follows gitignore wildmatch rules: a pattern without a slash
    matches a basename at any depth, a pattern containing a slash is anchored
    at the root, and a matching directory excludes everything below it.
    """

    patterns: tuple[str, ...]
    spec: pathspec.PathSpec

    def matches(self, relative_path: str) -> bool:
        """Return whether ``relative_path`` (POSIX, relative to its root) is ignored."""

        if not self.patterns:
            return False
        return self.spec.match_file(relative_path)

    def matches_directory(self, relative_dir: str) -> bool:
        """Return whether the whole directory ``relative_dir`` may be pruned.

        Pruning is only sound when no negated pattern could re-include a file
        below the directory, so any ``!`` pattern disables it.
        """

        if not self.patterns or self.has_negations:
            return False
        return self.spec.match_file(relative_dir) or self.spec.match_file(f"{relative_dir}/")

    @property
    def has_negations(self) -> bool:
        """Return ``True`` when any compiled pattern re-includes paths."""

        return any(pattern.startswith("!") for pattern in self.patterns)


def _check_syntax(pattern: str) -> None:
    """Reject glob syntax that the matcher would otherwise treat literally.

    Args:
        pattern: Raw ignore pattern supplied by the user.

    Raises:
        ConfigError: If a character class is left unclosed or the pattern ends
            with a dangling escape.
    """

    index, end = 0, len(pattern)
    while index < end:
        char = pattern[index]
        if char == "\\":
            if index + 1 >= end:
                raise ConfigError(f"Invalid ignore pattern {pattern!r}: dangling escape at end of pattern")
            index += 2
            continue
        if char == "[":
            close = index + 1
            if close < end and pattern[close] in "!^":
                close += 1
            if close < end and pattern[close] == "]":
                close += 1
            while close < end and pattern[close] != "]":
                close += 1
            if close >= end:
                raise ConfigError(f"Invalid ignore pattern {pattern!r}: unclosed character class")
            index = close + 1
            continue
        index += 1


def compile_ignore_patterns(patterns: Iterable[str]) -> IgnoreMatcher:
    """Compile ``patterns`` into an :class:`IgnoreMatcher`.

    Args:
        patterns: Glob-style ignore patterns in the order supplied by the user.

    Returns:
        IgnoreMatcher: Matcher applying every pattern uniformly across roots.

    Raises:
        ConfigError: If any pattern is syntactically invalid.
    """

    ordered = tuple(dict.fromkeys(pattern for pattern in patterns if pattern))
    for pattern in ordered:
        _check_syntax(pattern)
    try:
        spec = pathspec.GitIgnoreSpec.from_lines(ordered)
    except ValueError as exc:
        raise ConfigError(f"Invalid ignore pattern: {exc}") from exc
    return IgnoreMatcher(patterns=ordered, spec=spec)


__all__ = ["IgnoreMatcher", "compile_ignore_patterns"]
