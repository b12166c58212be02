# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report rendering and delivery."""

from __future__ import annotations

from .emitters import build_payload, render_human, render_json, render_report, render_yaml
from .sink import STDOUT_DESTINATION, write_output

__all__ = [
    "STDOUT_DESTINATION",
    "build_payload",
    "render_human",
    "render_json",
    "render_report",
    "render_yaml",
    "write_output",
]
