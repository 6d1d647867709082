# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the requirecheck package."""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from .severity import Severity

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
UnknownSymbolMap: TypeAlias = dict[str, list[str]]

UNKNOWN_SYMBOLS_KEY = "unknown-symbols"


class OutputChannel(str, Enum):
    """Output streams an external process writes to."""

    STDOUT = "stdout"
    STDERR = "stderr"


class Diagnostic(BaseModel):
    """Immutable finding delivered to a report sink."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    message: str
    tool: str | None = None


class UnknownSymbolsReport(BaseModel):
    """Decoded composer-require-checker JSON document.

    Only the ``unknown-symbols`` key is recognised; additional top-level keys
    such as ``_meta`` are ignored. Symbol order follows the decoded document.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    unknown_symbols: dict[StrictStr, list[StrictStr]] = Field(alias=UNKNOWN_SYMBOLS_KEY)

    @field_validator("unknown_symbols", mode="before")
    @classmethod
    def _coerce_empty_array(cls, value: JsonValue) -> JsonValue:
        """Treat an empty JSON array as an empty symbol mapping.

        PHP encodes an empty associative array as ``[]`` so the tool emits
        ``{"unknown-symbols": []}`` when nothing is missing.

        Args:
            value: Raw value decoded for the ``unknown-symbols`` key.

        Returns:
            JsonValue: ``{}`` for an empty list, otherwise ``value`` unchanged.
        """

        if isinstance(value, list) and not value:
            return {}
        return value


__all__ = [
    "Diagnostic",
    "JsonValue",
    "OutputChannel",
    "UNKNOWN_SYMBOLS_KEY",
    "UnknownSymbolMap",
    "UnknownSymbolsReport",
]
