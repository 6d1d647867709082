# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models and loaders for the plugin."""

from __future__ import annotations

from .loader import PYPROJECT_SECTION_KEY, load_config
from .models import ConfigError, RequireCheckerConfig, describe_configuration

__all__ = [
    "ConfigError",
    "PYPROJECT_SECTION_KEY",
    "RequireCheckerConfig",
    "describe_configuration",
    "load_config",
]
