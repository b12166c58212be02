# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Built-in text hygiene linters."""

from __future__ import annotations

from .whitespace import count_trailing_line_breaks, is_text, lint_bytes, lint_file

__all__ = ["count_trailing_line_breaks", "is_text", "lint_bytes", "lint_file"]
