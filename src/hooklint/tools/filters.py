# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Reduce project-wide tool output to the lines about specific files."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import PurePath


def relative_to_root(file_path: str, project_root: str) -> str | None:
    """Return ``file_path`` with the ``project_root`` prefix stripped.

    Args:
        file_path: Path string as supplied by the host.
        project_root: Project root directory.

    Returns:
        str | None: Relative path, or ``None`` when the path is outside the root.
    """

    prefix = project_root if project_root.endswith("/") else f"{project_root}/"
    if file_path.startswith(prefix):
        return file_path[len(prefix) :]
    return None


def filter_output_for_files(stdout: str, stderr: str, file_paths: Sequence[str], project_root: str) -> str:
    """Keep the lines of combined tool output that mention ``file_paths``.

    Lines are matched in precedence order: the exact input path, then the path
    relative to ``project_root``, then the bare file name. The file-name
    fallback also keeps lines about same-named files elsewhere in the
    project; callers rely on this ordering staying predictable.

    Args:
        stdout: Captured standard output of the tool.
        stderr: Captured standard error of the tool.
        file_paths: Requested file paths.
        project_root: Root the tool ran in.

    Returns:
        str: Matching lines joined by newlines; empty when nothing matches.
    """

    combined = f"{stderr}\n{stdout}"
    relative_paths = [rel for rel in (relative_to_root(path, project_root) for path in file_paths) if rel]
    file_names = [PurePath(path).name or path for path in file_paths]

    kept: list[str] = []
    for line in combined.splitlines():
        if (
            any(path in line for path in file_paths)
            or any(rel in line for rel in relative_paths)
            or any(name in line for name in file_names)
        ):
            kept.append(line)
    return "\n".join(kept)


__all__ = ["filter_output_for_files", "relative_to_root"]
