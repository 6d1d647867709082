# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Rich console management utilities."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from functools import lru_cache
from typing import Final, Literal, TypeAlias

from rich.console import Console

NO_COLOR_ENV: Final[str] = "NO_COLOR"

StreamName: TypeAlias = Literal["stdout", "stderr"]


def detect_tty(stream: StreamName = "stdout") -> bool:
    """Return ``True`` when ``stream`` appears to be backed by a terminal."""

    try:
        return getattr(sys, stream).isatty()
    except (AttributeError, ValueError):
        return False


def color_requested(color: bool, *, env: Mapping[str, str] | None = None) -> bool:
    """Return ``color`` unless the ``NO_COLOR`` convention disables it.

    Args:
        color: Colour preference expressed by the caller.
        env: Environment to inspect, defaults to :data:`os.environ`.

    Returns:
        bool: ``False`` when ``NO_COLOR`` is set to a non-empty value.
    """

    environ = os.environ if env is None else env
    return color and not environ.get(NO_COLOR_ENV)


class RichConsoleManager:
    """Hand out cached consoles per output stream and presentation flags."""

    def __init__(self) -> None:
        self._cache: dict[tuple[StreamName, bool, bool, bool], Console] = {}

    def get(self, *, color: bool, emoji: bool, stream: StreamName = "stdout") -> Console:
        """Return a console writing to ``stream`` with the requested styling.

        Consoles never bind the stream object itself, so redirected
        ``sys.stdout``/``sys.stderr`` are picked up at print time.

        Args:
            color: ``True`` when ANSI colour output should be enabled.
            emoji: ``True`` when emoji glyphs should be rendered.
            stream: Standard stream the console prints to.

        Returns:
            Console: Cached or newly constructed console.
        """

        tty = detect_tty(stream)
        styled = color_requested(color) and tty
        key = (stream, styled, emoji, tty)
        if key not in self._cache:
            self._cache[key] = Console(
                stderr=stream == "stderr",
                color_system="auto" if styled else None,
                force_terminal=tty,
                no_color=not styled,
                emoji=emoji,
                soft_wrap=True,
            )
        return self._cache[key]


@lru_cache(maxsize=1)
def get_console_manager() -> RichConsoleManager:
    """Return the process-wide :class:`RichConsoleManager` instance."""

    return RichConsoleManager()


__all__ = ["NO_COLOR_ENV", "RichConsoleManager", "color_requested", "detect_tty", "get_console_manager"]
