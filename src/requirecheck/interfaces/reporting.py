# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting and output transformation contracts."""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from ..core.models import OutputChannel
from ..core.severity import Severity


@runtime_checkable
class TaskReport(Protocol):
    """Sink collecting diagnostics for a single task run."""

    @abstractmethod
    def add_diagnostic(self, severity: Severity, message: str) -> None:
        """Record a diagnostic produced by the task.

        Args:
            severity: Severity assigned to the finding.
            message: Human readable description of the finding.

        Raises:
            NotImplementedError: When the sink has not been implemented.
        """

        raise NotImplementedError("TaskReport.add_diagnostic must be implemented")


@runtime_checkable
class OutputTransformer(Protocol):
    """Per-run consumer of process output that reports diagnostics on completion."""

    @abstractmethod
    def write(self, chunk: str, channel: OutputChannel) -> None:
        """Accept an output fragment emitted on ``channel``.

        Args:
            chunk: Text fragment in arrival order.
            channel: Stream the fragment was written to.
        """

        raise NotImplementedError("OutputTransformer.write must be implemented")

    @abstractmethod
    def finish(self, exit_code: int) -> None:
        """Complete the run and flush diagnostics to the report.

        Args:
            exit_code: Exit status reported by the external process.
        """

        raise NotImplementedError("OutputTransformer.finish must be implemented")


@runtime_checkable
class OutputTransformerFactory(Protocol):
    """Factory binding a report sink to a fresh transformer per task run."""

    @abstractmethod
    def create_for(self, report: TaskReport) -> OutputTransformer:
        """Return a new transformer that writes into ``report``.

        Args:
            report: Sink receiving the diagnostics of the run.

        Returns:
            OutputTransformer: Transformer with its own empty buffer.
        """

        raise NotImplementedError("OutputTransformerFactory.create_for must be implemented")


__all__ = ["OutputTransformer", "OutputTransformerFactory", "TaskReport"]
