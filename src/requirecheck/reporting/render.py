# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Helpers for rendering diagnostics to the console or JSON."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..core.models import Diagnostic, JsonValue
from ..core.severity import Severity, severity_to_sarif


def severity_color(sev: Severity) -> str:
    """Return the rich colour name associated with a severity level."""

    return {
        Severity.FATAL: "red",
        Severity.MAJOR: "red",
        Severity.MINOR: "yellow",
        Severity.MARGINAL: "yellow",
        Severity.INFO: "cyan",
        Severity.NONE: "white",
    }.get(sev, "yellow")


def serialize_diagnostic(diag: Diagnostic) -> dict[str, JsonValue]:
    """Convert a diagnostic into a JSON-friendly mapping."""

    return {
        "tool": diag.tool,
        "severity": diag.severity.value,
        "level": severity_to_sarif(diag.severity),
        "message": diag.message,
    }


def render_json(diagnostics: Sequence[Diagnostic]) -> str:
    """Return ``diagnostics`` as an indented JSON document."""

    return json.dumps({"diagnostics": [serialize_diagnostic(diag) for diag in diagnostics]}, indent=2)


def render_table(diagnostics: Sequence[Diagnostic], *, console: Console) -> None:
    """Print ``diagnostics`` as a severity-coloured table.

    Args:
        diagnostics: Diagnostics in emission order.
        console: Rich console receiving the output.
    """

    if not diagnostics:
        console.print("No diagnostics reported.")
        return
    table = Table(show_header=True, header_style="bold")
    table.add_column("Severity", no_wrap=True)
    table.add_column("Message")
    for diag in diagnostics:
        table.add_row(
            Text(diag.severity.value, style=severity_color(diag.severity)),
            Text(diag.message),
        )
    console.print(table)


__all__ = ["render_json", "render_table", "serialize_diagnostic", "severity_color"]
