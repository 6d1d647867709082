# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from requirecheck.reporting.report import DiagnosticReport


@pytest.fixture
def report() -> DiagnosticReport:
    """Return an empty report sink."""
    return DiagnosticReport(tool="composer-require-checker")
