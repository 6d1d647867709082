# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Map unknown symbol reports onto missing dependency diagnostics."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Final

from ..core.models import Diagnostic
from ..core.severity import Severity

TOOL_NAME: Final[str] = "composer-require-checker"


def missing_dependency_message(dependency: str, symbols: Iterable[str]) -> str:
    """Return the report line for ``dependency`` and the symbols that need it.

    Args:
        dependency: Package or extension name that would satisfy the symbols.
        symbols: Symbol names in the order they should be listed.

    Returns:
        str: Message such as ``Missing dependency "ext-json" (used symbols: "json_encode")``.
    """

    used = ", ".join(f'"{symbol}"' for symbol in symbols)
    return f'Missing dependency "{dependency}" (used symbols: {used})'


def map_unknown_symbols(unknown_symbols: Mapping[str, Sequence[str]]) -> list[Diagnostic]:
    """Return one MAJOR diagnostic per (symbol, dependency) pair.

    Symbols are visited in mapping order and dependencies in list order.
    Two symbols resolving to the same dependency each produce their own line.

    Args:
        unknown_symbols: Mapping of symbol names to candidate dependencies.

    Returns:
        list[Diagnostic]: Diagnostics in emission order.
    """

    return [
        Diagnostic(
            severity=Severity.MAJOR,
            message=missing_dependency_message(dependency, (symbol,)),
            tool=TOOL_NAME,
        )
        for symbol, dependencies in unknown_symbols.items()
        for dependency in dependencies
    ]


def map_unknown_symbols_by_dependency(unknown_symbols: Mapping[str, Sequence[str]]) -> list[Diagnostic]:
    """Return one MAJOR diagnostic per dependency listing every symbol using it.

    Dependencies keep the order in which they are first seen.

    Args:
        unknown_symbols: Mapping of symbol names to candidate dependencies.

    Returns:
        list[Diagnostic]: Diagnostics grouped by dependency.
    """

    grouped: dict[str, list[str]] = {}
    for symbol, dependencies in unknown_symbols.items():
        for dependency in dependencies:
            users = grouped.setdefault(dependency, [])
            if symbol not in users:
                users.append(symbol)
    return [
        Diagnostic(
            severity=Severity.MAJOR,
            message=missing_dependency_message(dependency, symbols),
            tool=TOOL_NAME,
        )
        for dependency, symbols in grouped.items()
    ]


__all__ = [
    "TOOL_NAME",
    "map_unknown_symbols",
    "map_unknown_symbols_by_dependency",
    "missing_dependency_message",
]
