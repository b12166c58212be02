# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Discovery helpers: ignore patterns, git tracking and directory traversal."""

from __future__ import annotations

from .filesystem import ALWAYS_EXCLUDE_NAMES, CandidateFile, DirectoryWalker, UnlistableDirectory, WalkEntry
from .git import NotApplicable, TrackedDecision, TrackedPaths, TrackedSetResolver
from .rules import IgnoreMatcher, compile_ignore_patterns

__all__ = [
    "ALWAYS_EXCLUDE_NAMES",
    "CandidateFile",
    "DirectoryWalker",
    "IgnoreMatcher",
    "NotApplicable",
    "TrackedDecision",
    "TrackedPaths",
    "TrackedSetResolver",
    "UnlistableDirectory",
    "WalkEntry",
    "compile_ignore_patterns",
]
