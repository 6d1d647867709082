# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocol definitions exchanged with the host orchestrator."""

from __future__ import annotations

from .reporting import OutputTransformer, OutputTransformerFactory, TaskReport

__all__ = ["OutputTransformer", "OutputTransformerFactory", "TaskReport"]
