# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration schema for the composer-require-checker plugin."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.models import JsonValue

DEFAULT_BINARY = "composer-require-checker"
DEFAULT_COMPOSER_FILE = Path("composer.json")


class ConfigError(Exception):
    """Raised when plugin configuration cannot be loaded or validated."""


def _kebab_alias(name: str) -> str:
    return name.replace("_", "-")


class RequireCheckerConfig(BaseModel):
    """Options controlling how composer-require-checker is invoked and reported."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=_kebab_alias,
        populate_by_name=True,
    )

    binary: str = Field(
        default=DEFAULT_BINARY,
        description="Executable name or path of composer-require-checker.",
    )
    config_file: Path | None = Field(
        default=None,
        description="Path to a composer-require-checker JSON configuration file.",
    )
    composer_file: Path = Field(
        default=DEFAULT_COMPOSER_FILE,
        description="composer.json to analyse; its directory becomes the working directory.",
    )
    ignore_parse_errors: bool = Field(
        default=False,
        description="Pass --ignore-parse-errors to skip files that fail to parse.",
    )
    custom_flags: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Additional arguments appended verbatim to the command line.",
    )
    group_by_dependency: bool = Field(
        default=False,
        description="Report one diagnostic per dependency listing all symbols that need it.",
    )

    @field_validator("custom_flags", mode="before")
    @classmethod
    def _coerce_flags(cls, value: Sequence[str] | str | None) -> tuple[str, ...]:
        """Return custom flags as a tuple of strings.

        Args:
            value: Raw flag value supplied to the model.

        Returns:
            tuple[str, ...]: Normalised flags.

        Raises:
            TypeError: If ``value`` is neither ``None``, a string, nor a sequence of strings.
        """

        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, (list, tuple)):
            return tuple(str(item) for item in value)
        raise TypeError("custom-flags must be a string or a list of strings")

    @field_validator("binary")
    @classmethod
    def _require_binary(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("binary must not be empty")
        return value


def describe_configuration() -> dict[str, JsonValue]:
    """Return the JSON schema describing :class:`RequireCheckerConfig`."""

    return RequireCheckerConfig.model_json_schema(by_alias=True)


__all__ = [
    "ConfigError",
    "DEFAULT_BINARY",
    "DEFAULT_COMPOSER_FILE",
    "RequireCheckerConfig",
    "describe_configuration",
]
