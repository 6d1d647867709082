# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Report sinks and renderers for collected diagnostics."""

from __future__ import annotations

from .render import render_json, render_table, serialize_diagnostic
from .report import DiagnosticReport

__all__ = ["DiagnosticReport", "render_json", "render_table", "serialize_diagnostic"]
