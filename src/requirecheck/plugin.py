# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plugin descriptor building composer-require-checker diagnostic tasks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .config.models import RequireCheckerConfig, describe_configuration
from .core.models import JsonValue
from .interfaces.reporting import OutputTransformerFactory
from .output.transformer import RequireCheckerTransformerFactory
from .parsers.require_checker import TOOL_NAME

CHECK_SUBCOMMAND: Final[str] = "check"
JSON_OUTPUT_FLAG: Final[str] = "--output=json"
IGNORE_PARSE_ERRORS_FLAG: Final[str] = "--ignore-parse-errors"


@dataclass(frozen=True, slots=True)
class PluginEnvironment:
    """Project information supplied by the host when tasks are created."""

    project_root: Path


class TaskSpec(BaseModel):
    """Everything the host needs to run the tool and interpret its output."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    command: tuple[str, ...] = Field(default_factory=tuple)
    working_directory: Path
    transformer_factory: OutputTransformerFactory


def _resolve(root: Path, path: Path) -> Path:
    return (path if path.is_absolute() else root / path).resolve()


def build_command(config: RequireCheckerConfig, composer_file: Path, config_file: Path | None) -> tuple[str, ...]:
    """Return the command line invoking composer-require-checker.

    Args:
        config: Plugin configuration.
        composer_file: Absolute path of the composer.json to analyse.
        config_file: Absolute path of the tool configuration file, if any.

    Returns:
        tuple[str, ...]: Executable followed by its arguments.
    """

    command = [config.binary, CHECK_SUBCOMMAND, JSON_OUTPUT_FLAG]
    if config_file is not None:
        command.append(f"--config-file={config_file}")
    if config.ignore_parse_errors:
        command.append(IGNORE_PARSE_ERRORS_FLAG)
    command.extend(config.custom_flags)
    command.append(str(composer_file))
    return tuple(command)


class ComposerRequireCheckerPlugin:
    """Stateless descriptor for the composer-require-checker integration."""

    @property
    def name(self) -> str:
        """Return the identifier the host registers the plugin under."""

        return TOOL_NAME

    def describe_configuration(self) -> dict[str, JsonValue]:
        """Return the JSON schema of the accepted configuration."""

        return describe_configuration()

    def create_diagnostic_tasks(
        self,
        config: RequireCheckerConfig,
        environment: PluginEnvironment,
    ) -> Iterator[TaskSpec]:
        """Yield the task analysing the project's composer.json.

        The task runs from the directory containing the composer file and
        carries a transformer factory so every run reports into its own sink.

        Args:
            config: Validated plugin configuration.
            environment: Project information supplied by the host.

        Yields:
            TaskSpec: The single composer-require-checker task.
        """

        root = environment.project_root
        composer_file = _resolve(root, config.composer_file)
        config_file = _resolve(root, config.config_file) if config.config_file is not None else None
        yield TaskSpec(
            name=TOOL_NAME,
            command=build_command(config, composer_file, config_file),
            working_directory=composer_file.parent,
            transformer_factory=RequireCheckerTransformerFactory(group_by_dependency=config.group_by_dependency),
        )


def create_plugin() -> ComposerRequireCheckerPlugin:
    """Return a new plugin descriptor."""

    return ComposerRequireCheckerPlugin()


__all__ = [
    "ComposerRequireCheckerPlugin",
    "PluginEnvironment",
    "TaskSpec",
    "build_command",
    "create_plugin",
]
