# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load plugin configuration from ``pyproject.toml`` or a standalone TOML file."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from .models import ConfigError, RequireCheckerConfig

LOGGER = logging.getLogger(__name__)

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "requirecheck"


def _read_toml(path: Path) -> Mapping[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Failed to parse TOML configuration at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc


def _pyproject_section(data: Mapping[str, Any], path: Path) -> Mapping[str, Any]:
    tool_section = data.get(PYPROJECT_TOOL_KEY, {})
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return section


def load_config(root: Path, *, path: Path | None = None) -> RequireCheckerConfig:
    """Return the plugin configuration for the project rooted at ``root``.

    A standalone TOML ``path`` holds the options at the top level; otherwise
    ``[tool.requirecheck]`` is read from ``<root>/pyproject.toml``. Missing
    sources yield the defaults.

    Args:
        root: Project root directory.
        path: Optional explicit configuration file, relative paths resolved against ``root``.

    Returns:
        RequireCheckerConfig: Validated configuration.

    Raises:
        ConfigError: If the source cannot be read or fails validation.
    """

    if path is not None:
        source = path if path.is_absolute() else root / path
        if not source.is_file():
            raise ConfigError(f"Configuration file not found: {source}")
        data = _read_toml(source)
        if source.name == PYPROJECT_FILENAME:
            data = _pyproject_section(data, source)
    else:
        source = root / PYPROJECT_FILENAME
        if not source.is_file():
            LOGGER.debug("no %s under %s, using defaults", PYPROJECT_FILENAME, root)
            return RequireCheckerConfig()
        data = _pyproject_section(_read_toml(source), source)
    try:
        return RequireCheckerConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {source}:\n{exc}") from exc


__all__ = ["PYPROJECT_FILENAME", "PYPROJECT_SECTION_KEY", "load_config"]
