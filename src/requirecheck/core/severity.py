# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import Final


class Severity(str, Enum):
    """Severity levels understood by the report sink."""

    NONE = "none"
    INFO = "info"
    MARGINAL = "marginal"
    MINOR = "minor"
    MAJOR = "major"
    FATAL = "fatal"


_SEVERITY_ORDER: Final[tuple[Severity, ...]] = (
    Severity.NONE,
    Severity.INFO,
    Severity.MARGINAL,
    Severity.MINOR,
    Severity.MAJOR,
    Severity.FATAL,
)

_SEVERITY_TO_SARIF_LEVEL: Final[dict[Severity, str]] = {
    Severity.FATAL: "error",
    Severity.MAJOR: "error",
    Severity.MINOR: "warning",
    Severity.MARGINAL: "warning",
    Severity.INFO: "note",
    Severity.NONE: "note",
}


def severity_rank(severity: Severity) -> int:
    """Return the position of ``severity`` in the ascending severity order.

    Args:
        severity: Severity to rank.

    Returns:
        int: Zero for :attr:`Severity.NONE`, increasing up to :attr:`Severity.FATAL`.
    """

    return _SEVERITY_ORDER.index(Severity(severity))


def severity_to_sarif(severity: Severity) -> str:
    """Map :class:`Severity` to a SARIF reporting level."""

    return _SEVERITY_TO_SARIF_LEVEL.get(severity, "warning")


__all__ = ["Severity", "severity_rank", "severity_to_sarif"]
