# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Resolve the project root and ecosystem owning an arbitrary file path.

Resolution runs in two steps. The file suffix selects an ecosystem; an
unknown suffix stops resolution immediately, which is how "unsupported file
type" differs from "supported but no project". The ecosystem then decides how
the root is found:

* the web ecosystem asks its package manager (``npm prefix``) from the file's
  directory;
* every other ecosystem walks upward from the file's directory looking for
  its manifest files, and the nearest directory holding one wins so nested
  modules shadow an enclosing workspace manifest.

Nothing is cached: every lookup reflects the current filesystem state.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .constants import ECOSYSTEM_EXTENSIONS, ECOSYSTEM_MARKERS
from .models import Ecosystem, ProjectDescriptor
from .process import SubprocessExecutionError, run_command

NPM_PREFIX_COMMAND = ("npm", "prefix")


def detect_ecosystem(file_path: str) -> Ecosystem | None:
    """Return the ecosystem associated with ``file_path``'s suffix.

    Args:
        file_path: Path string of the edited file.

    Returns:
        Ecosystem | None: Matching ecosystem, or ``None`` for unsupported types.
    """

    suffix = Path(file_path).suffix
    for ecosystem, extensions in ECOSYSTEM_EXTENSIONS.items():
        if suffix in extensions:
            return ecosystem
    return None


def resolve(file_path: str) -> ProjectDescriptor | None:
    """Return the project owning ``file_path``.

    Args:
        file_path: Absolute or relative path of the edited file.

    Returns:
        ProjectDescriptor | None: Root and ecosystem, or ``None`` when the file
        type is unsupported or no enclosing project exists.
    """

    ecosystem = detect_ecosystem(file_path)
    if ecosystem is None:
        return None

    start = Path(file_path).parent
    if ecosystem is Ecosystem.WEB:
        root = find_npm_root(start)
    else:
        root = find_marker_root(start, ECOSYSTEM_MARKERS[ecosystem])
    if root is None:
        return None
    return ProjectDescriptor(root=root, ecosystem=ecosystem)


def find_marker_root(start: Path, markers: Iterable[str]) -> str | None:
    """Walk upward from ``start`` to the nearest directory holding a marker.

    Args:
        start: Directory where the walk begins.
        markers: File names identifying a project root.

    Returns:
        str | None: Nearest matching directory, or ``None`` at the filesystem root.
    """

    names = tuple(markers)
    directory = start.absolute()
    for candidate in (directory, *directory.parents):
        if any((candidate / name).exists() for name in names):
            return str(candidate)
    return None


def find_npm_root(start: Path) -> str | None:
    """Return the package root reported by ``npm prefix`` run from ``start``.

    Args:
        start: Directory used as the working directory for npm.

    Returns:
        str | None: Reported root, or ``None`` when npm is unavailable, fails,
        or prints nothing.
    """

    if not start.is_dir():
        return None
    try:
        completed = run_command(NPM_PREFIX_COMMAND, cwd=start, check=True)
    except (OSError, SubprocessExecutionError):
        return None
    root = completed.stdout.strip()
    return root or None


__all__ = ["detect_ecosystem", "find_marker_root", "find_npm_root", "resolve"]
