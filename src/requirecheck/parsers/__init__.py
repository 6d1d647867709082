# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public parser exports for converting tool output into diagnostics."""

from __future__ import annotations

from .base import OutputParseError, load_unknown_symbols
from .require_checker import (
    map_unknown_symbols,
    map_unknown_symbols_by_dependency,
    missing_dependency_message,
)

__all__ = [
    "OutputParseError",
    "load_unknown_symbols",
    "map_unknown_symbols",
    "map_unknown_symbols_by_dependency",
    "missing_dependency_message",
]
