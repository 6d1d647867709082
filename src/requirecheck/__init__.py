# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""composer-require-checker integration for multi-tool analysis runs."""

from __future__ import annotations

from .core.models import Diagnostic, OutputChannel, UnknownSymbolsReport
from .core.severity import Severity
from .output.transformer import RequireCheckerOutputTransformer, RequireCheckerTransformerFactory
from .plugin import ComposerRequireCheckerPlugin, PluginEnvironment, TaskSpec, create_plugin
from .reporting.report import DiagnosticReport

__all__ = [
    "ComposerRequireCheckerPlugin",
    "Diagnostic",
    "DiagnosticReport",
    "OutputChannel",
    "PluginEnvironment",
    "RequireCheckerOutputTransformer",
    "RequireCheckerTransformerFactory",
    "Severity",
    "TaskSpec",
    "UnknownSymbolsReport",
    "create_plugin",
]
