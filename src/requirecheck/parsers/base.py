# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decoding of composer-require-checker JSON output."""

from __future__ import annotations

import json
from typing import cast

from pydantic import ValidationError

from ..core.models import JsonValue, UnknownSymbolsReport


class OutputParseError(ValueError):
    """Raised when tool output is not valid JSON or lacks the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def _describe_validation_error(exc: ValidationError) -> str:
    """Return a compact ``location: reason`` string for the first validation error."""

    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    reason = str(first.get("msg", "invalid value"))
    return f"{location}: {reason}" if location else reason


def load_unknown_symbols(text: str) -> UnknownSymbolsReport:
    """Decode ``text`` into an :class:`UnknownSymbolsReport`.

    Args:
        text: Complete standard output captured from the tool.

    Returns:
        UnknownSymbolsReport: Validated report preserving symbol order.

    Raises:
        OutputParseError: If ``text`` is not JSON or does not describe unknown symbols.
    """

    try:
        payload = cast(JsonValue, json.loads(text))
    except (ValueError, RecursionError) as exc:
        raise OutputParseError(str(exc)) from exc
    if not isinstance(payload, dict):
        raise OutputParseError(f"expected a JSON object, got {type(payload).__name__}")
    try:
        return UnknownSymbolsReport.model_validate(payload)
    except ValidationError as exc:
        raise OutputParseError(_describe_validation_error(exc)) from exc


__all__ = ["OutputParseError", "load_unknown_symbols"]
