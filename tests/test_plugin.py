# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the plugin descriptor and task construction."""

from __future__ import annotations

import json
from pathlib import Path

from requirecheck.config import RequireCheckerConfig
from requirecheck.core.models import OutputChannel
from requirecheck.core.severity import Severity
from requirecheck.plugin import ComposerRequireCheckerPlugin, PluginEnvironment, create_plugin
from requirecheck.reporting.report import DiagnosticReport


def test_plugin_name() -> None:
    assert create_plugin().name == "composer-require-checker"


def test_create_plugin_returns_fresh_descriptor() -> None:
    assert create_plugin() is not create_plugin()
    assert isinstance(create_plugin(), ComposerRequireCheckerPlugin)


def test_plugin_describes_config() -> None:
    schema = create_plugin().describe_configuration()
    assert schema["type"] == "object"


def test_default_task(tmp_path: Path) -> None:
    environment = PluginEnvironment(project_root=tmp_path)
    tasks = list(create_plugin().create_diagnostic_tasks(RequireCheckerConfig(), environment))
    assert len(tasks) == 1
    task = tasks[0]
    composer_file = (tmp_path / "composer.json").resolve()
    assert task.name == "composer-require-checker"
    assert task.command == ("composer-require-checker", "check", "--output=json", str(composer_file))
    assert task.working_directory == composer_file.parent


def test_task_command_includes_options(tmp_path: Path) -> None:
    config = RequireCheckerConfig(
        binary="vendor/bin/composer-require-checker",
        config_file=Path("build/require-checker.json"),
        composer_file=Path("packages/app/composer.json"),
        ignore_parse_errors=True,
        custom_flags=("-v",),
    )
    (task,) = create_plugin().create_diagnostic_tasks(config, PluginEnvironment(project_root=tmp_path))
    config_file = (tmp_path / "build" / "require-checker.json").resolve()
    composer_file = (tmp_path / "packages" / "app" / "composer.json").resolve()
    assert task.command == (
        "vendor/bin/composer-require-checker",
        "check",
        "--output=json",
        f"--config-file={config_file}",
        "--ignore-parse-errors",
        "-v",
        str(composer_file),
    )
    assert task.working_directory == composer_file.parent


def test_absolute_composer_file_is_kept(tmp_path: Path) -> None:
    composer_file = tmp_path / "elsewhere" / "composer.json"
    config = RequireCheckerConfig(composer_file=composer_file)
    (task,) = create_plugin().create_diagnostic_tasks(config, PluginEnvironment(project_root=tmp_path / "root"))
    assert task.command[-1] == str(composer_file.resolve())


def test_task_factory_reports_into_sink(tmp_path: Path) -> None:
    config = RequireCheckerConfig(group_by_dependency=True)
    (task,) = create_plugin().create_diagnostic_tasks(config, PluginEnvironment(project_root=tmp_path))
    report = DiagnosticReport(tool=task.name)
    transformer = task.transformer_factory.create_for(report)
    transformer.write(
        json.dumps({"unknown-symbols": {"json_encode": ["ext-json"], "json_decode": ["ext-json"]}}),
        OutputChannel.STDOUT,
    )
    transformer.finish(0)
    assert [(diag.severity, diag.message) for diag in report.diagnostics] == [
        (Severity.MAJOR, 'Missing dependency "ext-json" (used symbols: "json_encode", "json_decode")'),
    ]
