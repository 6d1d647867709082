# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime services shared by the CLI."""

from __future__ import annotations

from .console import RichConsoleManager, color_requested, detect_tty, get_console_manager

__all__ = ["RichConsoleManager", "color_requested", "detect_tty", "get_console_manager"]
