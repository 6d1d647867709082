# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests covering decoding and mapping of unknown symbol reports."""

from __future__ import annotations

import pytest

from requirecheck.core.models import Diagnostic
from requirecheck.core.severity import Severity
from requirecheck.parsers import (
    OutputParseError,
    load_unknown_symbols,
    map_unknown_symbols,
    map_unknown_symbols_by_dependency,
    missing_dependency_message,
)


def test_load_preserves_symbol_order() -> None:
    report = load_unknown_symbols('{"unknown-symbols": {"zeta": ["a"], "alpha": ["b"], "mid": ["c"]}}')
    assert list(report.unknown_symbols) == ["zeta", "alpha", "mid"]


def test_load_accepts_empty_array() -> None:
    assert load_unknown_symbols('{"unknown-symbols": []}').unknown_symbols == {}


def test_load_reports_json_error_detail() -> None:
    with pytest.raises(OutputParseError) as excinfo:
        load_unknown_symbols("foo bar")
    assert excinfo.value.detail.startswith("Expecting value")


def test_load_reports_missing_key() -> None:
    with pytest.raises(OutputParseError) as excinfo:
        load_unknown_symbols('{"_meta": {}}')
    assert "unknown-symbols" in excinfo.value.detail


def test_load_rejects_non_object_document() -> None:
    with pytest.raises(OutputParseError, match="expected a JSON object"):
        load_unknown_symbols("[1, 2]")


def test_load_rejects_numeric_dependency() -> None:
    with pytest.raises(OutputParseError):
        load_unknown_symbols('{"unknown-symbols": {"Foo": [42]}}')


def test_missing_dependency_message_quotes_symbols() -> None:
    assert (
        missing_dependency_message("ext-json", ["json_encode", "json_decode"])
        == 'Missing dependency "ext-json" (used symbols: "json_encode", "json_decode")'
    )


def test_map_unknown_symbols_emits_one_diagnostic_per_pair() -> None:
    diagnostics = map_unknown_symbols(
        {
            "json_encode": ["ext-json"],
            "json_decode": ["ext-json"],
            "Foo\\Bar": ["vendor/foo", "vendor/bar"],
        },
    )
    assert [diag.message for diag in diagnostics] == [
        'Missing dependency "ext-json" (used symbols: "json_encode")',
        'Missing dependency "ext-json" (used symbols: "json_decode")',
        'Missing dependency "vendor/foo" (used symbols: "Foo\\Bar")',
        'Missing dependency "vendor/bar" (used symbols: "Foo\\Bar")',
    ]
    assert {diag.severity for diag in diagnostics} == {Severity.MAJOR}


def test_map_unknown_symbols_skips_symbols_without_candidates() -> None:
    assert map_unknown_symbols({"Foo": [], "Bar": ["vendor/bar"]}) == [
        Diagnostic(
            severity=Severity.MAJOR,
            message='Missing dependency "vendor/bar" (used symbols: "Bar")',
            tool="composer-require-checker",
        ),
    ]


def test_map_unknown_symbols_empty_mapping() -> None:
    assert map_unknown_symbols({}) == []


def test_map_by_dependency_keeps_first_seen_order() -> None:
    diagnostics = map_unknown_symbols_by_dependency(
        {
            "a": ["vendor/two", "vendor/one"],
            "b": ["vendor/one"],
        },
    )
    assert [diag.message for diag in diagnostics] == [
        'Missing dependency "vendor/two" (used symbols: "a")',
        'Missing dependency "vendor/one" (used symbols: "a", "b")',
    ]


def test_diagnostic_is_immutable() -> None:
    diagnostic = Diagnostic(severity=Severity.INFO, message="note")
    with pytest.raises(ValueError):
        diagnostic.message = "changed"  # type: ignore[misc]


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("[" * 100000, id="deeply-nested"),
        pytest.param('{"unknown-symbols": ' + "9" * 5000 + "}", id="oversized-integer"),
    ],
)
def test_load_wraps_non_syntax_decoder_failures(text: str) -> None:
    with pytest.raises(OutputParseError):
        load_unknown_symbols(text)
