# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Render hook decisions using the single-line continue/block protocol."""

from __future__ import annotations

import unicodedata
from typing import Final

from .constants import MESSAGE_PREFIX
from .models import Decision, LintOutcome

CONTINUE_LINE: Final[str] = '{"continue":true}'
BLOCK_MARKER: Final[str] = '"decision":"block"'

_SIMPLE_ESCAPES: Final[dict[str, str]] = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def escape_json(text: str) -> str:
    """Escape ``text`` for placement inside a JSON string literal.

    Quotes, backslashes, and the common whitespace controls use their short
    escapes; every other control character becomes ``\\u00xx`` in lower-case
    hex. All remaining characters, including non-ASCII text, pass through.

    Args:
        text: Arbitrary user-controlled text.

    Returns:
        str: Escaped text safe to embed between double quotes.
    """

    parts: list[str] = []
    for char in text:
        simple = _SIMPLE_ESCAPES.get(char)
        if simple is not None:
            parts.append(simple)
        elif unicodedata.category(char) == "Cc":
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(char)
    return "".join(parts)


def render_decision(decision: Decision, *, verbose: bool) -> str:
    """Return the protocol line for ``decision``.

    Block reasons are always emitted; continue messages only in verbose mode.

    Args:
        decision: Decision produced by the runner.
        verbose: Whether informational messages should be included.

    Returns:
        str: Single-line JSON text without a trailing newline.
    """

    if decision.blocked:
        return f'{{"decision":"block","reason":"{escape_json(decision.message or "")}"}}'
    if verbose and decision.message is not None:
        return f'{{"continue":true,"systemMessage":"{escape_json(decision.message)}"}}'
    return CONTINUE_LINE


def is_block_line(line: str) -> bool:
    """Return whether a rendered protocol line blocks the host."""

    return BLOCK_MARKER in line


def prefixed(message: str) -> str:
    """Return ``message`` tagged with the hook's message prefix."""

    return f"{MESSAGE_PREFIX} {message}"


def outcome_decision(outcome: LintOutcome) -> Decision:
    """Translate a lint outcome into the decision reported to the host.

    Args:
        outcome: Normalised dispatcher result.

    Returns:
        Decision: Continue for passing or skipped runs, block otherwise.
    """

    if outcome.skipped:
        return Decision.proceed(prefixed(outcome.message))
    if outcome.passed:
        return Decision.proceed(prefixed(f"lint passed for {outcome.label} using {outcome.tool_name}."))
    return Decision.block(
        prefixed(f"lint errors in {outcome.label} using {outcome.tool_name}:\n\n{outcome.message}\n\nFix lint errors."),
    )


__all__ = [
    "BLOCK_MARKER",
    "CONTINUE_LINE",
    "escape_json",
    "is_block_line",
    "outcome_decision",
    "prefixed",
    "render_decision",
]
