# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for configuration loading and schema description."""

from __future__ import annotations

from pathlib import Path

import pytest

from requirecheck.config import ConfigError, RequireCheckerConfig, describe_configuration, load_config


def test_defaults_when_no_pyproject(tmp_path: Path) -> None:
    config = load_config(tmp_path)
    assert config == RequireCheckerConfig()
    assert config.binary == "composer-require-checker"
    assert config.composer_file == Path("composer.json")
    assert config.custom_flags == ()


def test_reads_pyproject_section(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        """
[tool.requirecheck]
config-file = "require-checker.json"
ignore-parse-errors = true
custom-flags = ["-vvv"]
group-by-dependency = true
""".strip(),
        encoding="utf-8",
    )
    config = load_config(tmp_path)
    assert config.config_file == Path("require-checker.json")
    assert config.ignore_parse_errors is True
    assert config.custom_flags == ("-vvv",)
    assert config.group_by_dependency is True


def test_pyproject_without_section_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")
    assert load_config(tmp_path) == RequireCheckerConfig()


def test_standalone_file_reads_top_level(tmp_path: Path) -> None:
    (tmp_path / "requirecheck.toml").write_text('binary = "vendor/bin/composer-require-checker"\n', encoding="utf-8")
    config = load_config(tmp_path, path=Path("requirecheck.toml"))
    assert config.binary == "vendor/bin/composer-require-checker"


def test_single_flag_string_is_accepted() -> None:
    assert RequireCheckerConfig.model_validate({"custom-flags": "--verbose"}).custom_flags == ("--verbose",)


def test_unknown_option_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.requirecheck]\nphp-command = 'php8'\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(tmp_path)


def test_invalid_toml_is_reported(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.requirecheck\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Failed to parse TOML"):
        load_config(tmp_path)


def test_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path, path=tmp_path / "absent.toml")


def test_describe_configuration_uses_option_names() -> None:
    schema = describe_configuration()
    properties = schema["properties"]
    assert isinstance(properties, dict)
    assert {"binary", "config-file", "composer-file", "ignore-parse-errors", "custom-flags"} <= set(properties)
