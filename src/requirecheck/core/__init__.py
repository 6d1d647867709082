# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core value types shared across the requirecheck package."""

from __future__ import annotations

from .models import Diagnostic, OutputChannel, UnknownSymbolsReport
from .severity import Severity, severity_rank, severity_to_sarif

__all__ = [
    "Diagnostic",
    "OutputChannel",
    "Severity",
    "UnknownSymbolsReport",
    "severity_rank",
    "severity_to_sarif",
]
