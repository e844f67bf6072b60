# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Durable, session-keyed record of files awaiting a batched lint pass.

``collect`` and ``drain`` run as separate processes, so pending paths live in
one small file per session inside a shared state directory (the platform
temporary directory by default). Each line holds one JSON-encoded path so
paths containing newlines survive the round trip.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from .config import default_state_dir
from .constants import SESSION_FILE_PREFIX, SESSION_FILE_SUFFIX

_CLAIM_SUFFIX = ".draining"


class SessionStore:
    """File-backed store with idempotent append and exactly-once drain."""

    def __init__(self, state_dir: Path | None = None) -> None:
        """Initialise the store.

        Args:
            state_dir: Directory holding session records; defaults to the
                platform temporary directory.
        """

        self.state_dir = state_dir if state_dir is not None else default_state_dir()

    def record_path(self, session_id: str) -> Path:
        """Return the record file used for ``session_id``.

        Args:
            session_id: Opaque session identifier supplied by the host.

        Returns:
            Path: Location of the session's record file.

        Raises:
            ValueError: If the identifier is empty or could escape the state directory.
        """

        if not session_id or session_id in {".", ".."} or "/" in session_id or os.sep in session_id:
            raise ValueError(f"invalid session id: {session_id!r}")
        return self.state_dir / f"{SESSION_FILE_PREFIX}{session_id}{SESSION_FILE_SUFFIX}"

    def record(self, session_id: str, file_path: str) -> None:
        """Append ``file_path`` to the session unless it is already recorded.

        Args:
            session_id: Session the path belongs to.
            file_path: Path string stored verbatim.
        """

        path = self.record_path(session_id)
        if file_path in _read_entries(path):
            return
        self.state_dir.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(file_path) + "\n")

    def drain(self, session_id: str) -> list[str]:
        """Return and delete every path recorded for ``session_id``.

        The record is claimed by an atomic rename before it is read, so only
        one drain can observe a given record.

        Args:
            session_id: Session whose record should be consumed.

        Returns:
            list[str]: Non-empty paths in first-insertion order; empty when no
            record exists.
        """

        path = self.record_path(session_id)
        claimed = path.with_name(f"{path.name}.{os.getpid()}{_CLAIM_SUFFIX}")
        try:
            os.replace(path, claimed)
        except FileNotFoundError:
            return []
        try:
            return [entry for entry in _read_entries(claimed) if entry]
        finally:
            claimed.unlink(missing_ok=True)

    def pending(self, session_id: str) -> list[str]:
        """Return the recorded paths without consuming them."""

        return [entry for entry in _read_entries(self.record_path(session_id)) if entry]


def _read_entries(path: Path) -> list[str]:
    """Return the decoded entries stored in ``path``.

    Args:
        path: Record file to read.

    Returns:
        list[str]: Stored entries; empty when the file does not exist.
    """

    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return []
    entries: list[str] = []
    for line in lines:
        if not line:
            continue
        try:
            value = json.loads(line)
        except json.JSONDecodeError:
            value = line
        entries.append(value if isinstance(value, str) else line)
    return entries


__all__ = ["SessionStore"]
