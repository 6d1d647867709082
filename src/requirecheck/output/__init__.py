# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Output transformers turning process output into report diagnostics."""

from __future__ import annotations

from .transformer import RequireCheckerOutputTransformer, RequireCheckerTransformerFactory, TransformerState

__all__ = ["RequireCheckerOutputTransformer", "RequireCheckerTransformerFactory", "TransformerState"]
