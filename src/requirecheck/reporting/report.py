# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory report sink collecting diagnostics for a task run."""

from __future__ import annotations

from ..core.models import Diagnostic
from ..core.severity import Severity, severity_rank
from ..interfaces.reporting import TaskReport


class DiagnosticReport(TaskReport):
    """Record diagnostics in arrival order for later rendering."""

    def __init__(self, tool: str | None = None) -> None:
        self.tool = tool
        self._diagnostics: list[Diagnostic] = []

    def add_diagnostic(self, severity: Severity, message: str) -> None:
        """Append a diagnostic tagged with the report's tool name.

        Args:
            severity: Severity assigned to the finding.
            message: Human readable description of the finding.
        """

        self._diagnostics.append(Diagnostic(severity=Severity(severity), message=message, tool=self.tool))

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        """Return the recorded diagnostics in arrival order."""

        return tuple(self._diagnostics)

    def highest_severity(self) -> Severity:
        """Return the most severe recorded level, or :attr:`Severity.NONE` when empty."""

        if not self._diagnostics:
            return Severity.NONE
        return max((diag.severity for diag in self._diagnostics), key=severity_rank)

    def has_failures(self, threshold: Severity = Severity.MAJOR) -> bool:
        """Return ``True`` when any diagnostic is at least as severe as ``threshold``."""

        limit = severity_rank(threshold)
        return any(severity_rank(diag.severity) >= limit for diag in self._diagnostics)


__all__ = ["DiagnosticReport"]
