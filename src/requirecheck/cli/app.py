# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application replaying captured tool output through the plugin."""

from __future__ import annotations

import json
import shlex
from enum import Enum
from pathlib import Path
from typing import Annotated, Final

import typer

from ..config import ConfigError, RequireCheckerConfig, describe_configuration, load_config
from ..core.models import OutputChannel
from ..core.severity import Severity
from ..logging import fail, ok, warn
from ..plugin import PluginEnvironment, TaskSpec, create_plugin
from ..reporting.render import render_json, render_table
from ..reporting.report import DiagnosticReport
from ..runtime.console import detect_tty, get_console_manager

CHUNK_SIZE: Final[int] = 4096
STDIN_MARKER: Final[str] = "-"
CONFIG_ERROR_EXIT_CODE: Final[int] = 2

app = typer.Typer(
    name="requirecheck",
    help="Report composer-require-checker findings as diagnostics.",
    no_args_is_help=True,
    add_completion=False,
)


class OutputFormat(str, Enum):
    """Rendering formats supported by the ``report`` command."""

    TABLE = "table"
    JSON = "json"


RootOption = Annotated[
    Path,
    typer.Option("--root", "-r", help="Project root directory.", file_okay=False, resolve_path=True),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="TOML configuration file (defaults to pyproject.toml)."),
]


def _load_or_exit(root: Path, config_path: Path | None) -> RequireCheckerConfig:
    try:
        return load_config(root, path=config_path)
    except ConfigError as exc:
        fail(str(exc), use_emoji=True)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc


def _single_task(config: RequireCheckerConfig, root: Path) -> TaskSpec:
    return next(iter(create_plugin().create_diagnostic_tasks(config, PluginEnvironment(project_root=root))))


@app.command("describe")
def describe_command() -> None:
    """Print the JSON schema of the plugin configuration."""

    typer.echo(json.dumps(describe_configuration(), indent=2))


@app.command("command")
def command_command(
    root: RootOption = Path(),
    config_path: ConfigOption = None,
) -> None:
    """Print the command line and working directory the plugin would run."""

    task = _single_task(_load_or_exit(root, config_path), root)
    typer.echo(shlex.join(task.command))
    typer.echo(f"cwd: {task.working_directory}")


@app.command("report")
def report_command(
    output: Annotated[str, typer.Argument(help="Captured stdout of composer-require-checker, or '-' for stdin.")],
    exit_code: Annotated[int, typer.Option("--exit-code", help="Exit status the tool reported.")] = 0,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Rendering format."),
    ] = OutputFormat.TABLE,
    fail_on: Annotated[
        Severity,
        typer.Option("--fail-on", help="Exit non-zero when a diagnostic reaches this severity."),
    ] = Severity.MAJOR,
    group_by_dependency: Annotated[
        bool | None,
        typer.Option(
            "--group-by-dependency/--no-group-by-dependency",
            help="Report one diagnostic per missing dependency (overrides the configuration).",
        ),
    ] = None,
    root: RootOption = Path(),
    config_path: ConfigOption = None,
) -> None:
    """Convert captured composer-require-checker output into diagnostics."""

    config = _load_or_exit(root, config_path)
    if group_by_dependency is not None:
        config = config.model_copy(update={"group_by_dependency": group_by_dependency})
    if output == STDIN_MARKER:
        raw = typer.get_binary_stream("stdin").read()
    else:
        source = Path(output)
        if not source.is_file():
            raise typer.BadParameter(f"Output file not found: {source}", param_hint="OUTPUT")
        raw = source.read_bytes()
    text = raw.decode("utf-8", errors="replace")

    task = _single_task(config, root)
    report = DiagnosticReport(tool=task.name)
    transformer = task.transformer_factory.create_for(report)
    for start in range(0, len(text), CHUNK_SIZE):
        transformer.write(text[start : start + CHUNK_SIZE], OutputChannel.STDOUT)
    transformer.finish(exit_code)

    if output_format is OutputFormat.JSON:
        typer.echo(render_json(report.diagnostics))
    else:
        console = get_console_manager().get(color=detect_tty(), emoji=True)
        render_table(report.diagnostics, console=console)

    if report.has_failures(fail_on):
        if output_format is OutputFormat.TABLE:
            highest = report.highest_severity().value
            warn(f"{len(report.diagnostics)} diagnostic(s), highest severity {highest}", use_emoji=True)
        raise typer.Exit(code=1)
    if output_format is OutputFormat.TABLE:
        ok("No diagnostics reached the failure threshold", use_emoji=True)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["OutputFormat", "app", "main"]
