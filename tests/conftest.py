# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors

"""Shared pytest fixtures."""

from __future__ import annotations

import shlex
import stat
from collections.abc import Callable
from pathlib import Path

import pytest

ToolFactory = Callable[..., Path]


def write_tool(
    directory: Path,
    name: str,
    *,
    stdout: str = "",
    stderr: str = "",
    exit_code: int = 0,
    args_file: Path | None = None,
) -> Path:
    """Write an executable ``sh`` script standing in for a lint tool."""

    directory.mkdir(parents=True, exist_ok=True)
    lines = ["#!/bin/sh"]
    if args_file is not None:
        lines.append(f"printf '%s\\n' \"$@\" > {shlex.quote(str(args_file))}")
    if stdout:
        lines.append(f"printf '%s' {shlex.quote(stdout)}")
    if stderr:
        lines.append(f"printf '%s' {shlex.quote(stderr)} >&2")
    lines.append(f"exit {exit_code}")
    script = directory / name
    script.write_text("\n".join(lines) + "\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return script


@pytest.fixture
def make_tool() -> ToolFactory:
    """Return the fake tool factory."""

    return write_tool


@pytest.fixture
def path_bin(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Replace ``PATH`` with an empty directory tests can populate."""

    bin_dir = tmp_path / "path-bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir))
    return bin_dir


@pytest.fixture
def state_dir(tmp_path: Path) -> Path:
    """Return an isolated directory for session records."""

    directory = tmp_path / "state"
    directory.mkdir()
    return directory
