# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Buffer composer-require-checker output and report diagnostics on completion.

A transformer lives for exactly one task run. Standard output fragments are
accumulated in call order and parsed once when :meth:`finish` is called;
standard error is left to the host. Malformed output is reported as a single
FATAL diagnostic instead of raising, so a broken tool cannot take the
orchestrator down with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final

from ..core.models import Diagnostic, OutputChannel
from ..core.severity import Severity
from ..interfaces.reporting import OutputTransformer, OutputTransformerFactory, TaskReport
from ..parsers.base import OutputParseError, load_unknown_symbols
from ..parsers.require_checker import map_unknown_symbols, map_unknown_symbols_by_dependency

LOGGER = logging.getLogger(__name__)

PARSE_FAILURE_PREFIX: Final[str] = "Unable to parse output: "
NO_UNKNOWN_SYMBOLS_MESSAGE: Final[str] = "There were no unknown symbols found."


class TransformerState(str, Enum):
    """Lifecycle of a transformer within a task run."""

    CREATED = "created"
    ACCUMULATING = "accumulating"
    FINISHED = "finished"


class RequireCheckerOutputTransformer(OutputTransformer):
    """Accumulate stdout for one run and emit diagnostics into ``report``."""

    def __init__(self, report: TaskReport, *, group_by_dependency: bool = False) -> None:
        """Bind the transformer to ``report`` with an empty buffer.

        Args:
            report: Sink receiving the diagnostics of this run.
            group_by_dependency: Emit one diagnostic per dependency instead of
                one per (symbol, dependency) pair.
        """

        self._report = report
        self._group_by_dependency = group_by_dependency
        self._buffer: list[str] = []
        self._state = TransformerState.CREATED

    @property
    def state(self) -> TransformerState:
        """Return the current lifecycle state."""

        return self._state

    def write(self, chunk: str, channel: OutputChannel) -> None:
        """Append ``chunk`` to the buffer when it was written to stdout.

        Fragments arriving after the run finished are dropped.

        Args:
            chunk: Output fragment in arrival order.
            channel: Stream the fragment was written to.
        """

        if self._state is TransformerState.FINISHED:
            LOGGER.warning("dropping output written after the run finished")
            return
        self._state = TransformerState.ACCUMULATING
        if channel != OutputChannel.STDOUT:
            LOGGER.debug("ignoring %d characters written to %s", len(chunk), channel)
            return
        self._buffer.append(chunk)

    def finish(self, exit_code: int) -> None:
        """Parse the buffered output and report the resulting diagnostics.

        The exit code is logged but does not influence which diagnostics are
        produced; the JSON document is authoritative.

        Args:
            exit_code: Exit status reported by the external process.

        Raises:
            RuntimeError: If the run has already finished.
        """

        self._ensure_open()
        self._state = TransformerState.FINISHED
        if exit_code != 0:
            LOGGER.info("composer-require-checker exited with status %d", exit_code)
        text = "".join(self._buffer)
        self._buffer.clear()
        for diagnostic in self._diagnostics_for(text):
            self._report.add_diagnostic(diagnostic.severity, diagnostic.message)

    def _diagnostics_for(self, text: str) -> list[Diagnostic]:
        try:
            parsed = load_unknown_symbols(text)
        except OutputParseError as exc:
            LOGGER.debug("failed to parse composer-require-checker output: %s", exc.detail)
            return [Diagnostic(severity=Severity.FATAL, message=f"{PARSE_FAILURE_PREFIX}{exc.detail}")]
        if not parsed.unknown_symbols:
            return [Diagnostic(severity=Severity.INFO, message=NO_UNKNOWN_SYMBOLS_MESSAGE)]
        if self._group_by_dependency:
            return map_unknown_symbols_by_dependency(parsed.unknown_symbols)
        return map_unknown_symbols(parsed.unknown_symbols)

    def _ensure_open(self) -> None:
        if self._state is TransformerState.FINISHED:
            raise RuntimeError("output transformer has already finished")


@dataclass(frozen=True)
class RequireCheckerTransformerFactory(OutputTransformerFactory):
    """Create an independent :class:`RequireCheckerOutputTransformer` per run."""

    group_by_dependency: bool = False

    def create_for(self, report: TaskReport) -> RequireCheckerOutputTransformer:
        """Return a fresh transformer bound to ``report``.

        Args:
            report: Sink receiving the diagnostics of the run.

        Returns:
            RequireCheckerOutputTransformer: Transformer with its own empty buffer.
        """

        return RequireCheckerOutputTransformer(report, group_by_dependency=self.group_by_dependency)


__all__ = [
    "NO_UNKNOWN_SYMBOLS_MESSAGE",
    "PARSE_FAILURE_PREFIX",
    "RequireCheckerOutputTransformer",
    "RequireCheckerTransformerFactory",
    "TransformerState",
]
