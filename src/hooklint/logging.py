# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Diagnostic logging helpers rendered through Rich on standard error.

Standard output is reserved for the single decision line, so every helper
here writes to a stderr-bound console and stays silent unless tracing is
enabled.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from functools import cache

from rich.console import Console
from rich.text import Text

_KEY_VALUE_RE = re.compile(r"([\w-]+)=(\".*?\"|\S+)")


@cache
def get_console() -> Console:
    """Return the cached stderr console used for trace output.

    Returns:
        Console: Rich console writing to standard error without colour.
    """

    return Console(stderr=True, no_color=True, highlight=False, soft_wrap=True)


@dataclass(slots=True)
class HookLogger:
    """Trace logger bound to a stderr console."""

    enabled: bool = False
    console: Console = field(default_factory=get_console)

    def debug(self, message: str) -> None:
        """Emit a debug line highlighting ``key=value`` pairs.

        Args:
            message: Debug payload to render.
        """

        if not self.enabled:
            return
        text = Text("[hooklint] ", style="bold cyan")
        cursor = 0
        for match in _KEY_VALUE_RE.finditer(message):
            start, end = match.span()
            if start > cursor:
                text.append(message[cursor:start], style="dim")
            key, raw_value = match.group(1), match.group(2)
            text.append(key, style="bold magenta")
            text.append("=", style="dim")
            text.append(raw_value, style="bold blue" if key in {"command", "cmd"} else "bold green")
            cursor = end
        if cursor < len(message):
            text.append(message[cursor:], style="dim")
        self.console.print(text)

    def info(self, message: str) -> None:
        """Emit an informational line."""

        self._print(message, style="cyan")

    def warn(self, message: str) -> None:
        """Emit a warning line."""

        self._print(message, style="yellow")

    def _print(self, message: str, *, style: str) -> None:
        if not self.enabled:
            return
        text = Text(message)
        text.stylize(style)
        self.console.print(text)


def build_logger(*, trace: bool) -> HookLogger:
    """Return a ``HookLogger`` configured for the current invocation.

    Args:
        trace: Whether diagnostic output should be written at all.

    Returns:
        HookLogger: Logger bound to the cached stderr console.
    """

    return HookLogger(enabled=trace, console=get_console())


__all__ = ["HookLogger", "build_logger", "get_console"]
