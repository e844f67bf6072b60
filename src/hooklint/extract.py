# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Minimal scanner pulling flat string fields out of hook payloads.

Payloads are JSON-shaped but only a handful of string fields are ever read,
so the scanner looks for the first ``"<key>":`` occurrence regardless of
nesting depth and decodes the quoted string that follows. It intentionally
does not validate the surrounding document:

* escapes ``\\n``, ``\\r``, ``\\t``, ``\\\\``, ``\\"`` and ``\\/`` are decoded;
* any other escape is kept literally (backslash plus character);
* a value that is not a string (number, ``null``, object) yields ``None``;
* an unterminated string yields ``None``.
"""

from __future__ import annotations

from typing import Final

FILE_PATH_KEY: Final[str] = "file_path"
SESSION_ID_KEY: Final[str] = "session_id"
REASON_KEY: Final[str] = "reason"

_ESCAPES: Final[dict[str, str]] = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "\\": "\\",
    '"': '"',
    "/": "/",
}


def extract_field(payload: str, key: str) -> str | None:
    """Return the string value stored under ``key`` in ``payload``.

    Args:
        payload: Raw event text read from the host.
        key: Field name to locate.

    Returns:
        str | None: Decoded value, or ``None`` when the key is absent, the
        value is not a string, or the string is never closed.
    """

    marker = f'"{key}":'
    index = payload.find(marker)
    if index < 0:
        return None
    rest = payload[index + len(marker) :].lstrip()
    if not rest.startswith('"'):
        return None
    return _decode_string(rest, 1)


def _decode_string(text: str, start: int) -> str | None:
    """Decode a quoted string body beginning at ``start``.

    Args:
        text: Text whose opening quote precedes ``start``.
        start: Index of the first character after the opening quote.

    Returns:
        str | None: Decoded string, or ``None`` when no closing quote exists.
    """

    chars: list[str] = []
    index = start
    length = len(text)
    while index < length:
        char = text[index]
        if char == '"':
            return "".join(chars)
        if char == "\\":
            index += 1
            if index >= length:
                break
            escaped = text[index]
            chars.append(_ESCAPES.get(escaped, "\\" + escaped))
        else:
            chars.append(char)
        index += 1
    return None


def extract_file_path(payload: str) -> str | None:
    """Return the ``file_path`` field of an edit event."""

    return extract_field(payload, FILE_PATH_KEY)


def extract_session_id(payload: str) -> str | None:
    """Return the ``session_id`` field of an edit event."""

    return extract_field(payload, SESSION_ID_KEY)


def extract_reason(payload: str) -> str | None:
    """Return the ``reason`` field of a rendered block decision."""

    return extract_field(payload, REASON_KEY)


__all__ = [
    "FILE_PATH_KEY",
    "REASON_KEY",
    "SESSION_ID_KEY",
    "extract_field",
    "extract_file_path",
    "extract_reason",
    "extract_session_id",
]
