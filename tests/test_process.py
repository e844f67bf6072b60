# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors

"""Tests for subprocess helpers and trace logging."""

from __future__ import annotations

import io
import stat
from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.console import Console

from hooklint.config import HookSettings, default_state_dir
from hooklint.logging import HookLogger, build_logger, get_console
from hooklint.process import TIMEOUT_EXIT_CODE, SubprocessExecutionError, find_executable, run_command

ToolFactory = Callable[..., Path]


def test_run_command_captures_output(tmp_path: Path, make_tool: ToolFactory) -> None:
    tool = make_tool(tmp_path, "fake", stdout="out", stderr="err", exit_code=3)

    completed = run_command([str(tool)], cwd=tmp_path)

    assert completed.returncode == 3
    assert completed.stdout == "out"
    assert completed.stderr == "err"


def test_run_command_check_raises(tmp_path: Path, make_tool: ToolFactory) -> None:
    tool = make_tool(tmp_path, "fake", stderr="bad", exit_code=2)

    with pytest.raises(SubprocessExecutionError) as excinfo:
        run_command([str(tool)], check=True)

    assert excinfo.value.returncode == 2
    assert excinfo.value.stderr == "bad"


def test_run_command_missing_executable(path_bin: Path) -> None:
    with pytest.raises(FileNotFoundError):
        run_command(["hooklint-no-such-tool"])


def test_run_command_timeout_reports_124(tmp_path: Path) -> None:
    script = tmp_path / "spin"
    script.write_text("#!/bin/sh\nwhile :; do :; done\n", encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)

    completed = run_command([str(script)], timeout=0.2)

    assert completed.returncode == TIMEOUT_EXIT_CODE
    assert "Command timed out after 0.2s" in completed.stderr


def test_find_executable_prefers_search_dirs(tmp_path: Path, path_bin: Path, make_tool: ToolFactory) -> None:
    make_tool(path_bin, "tool")
    local = make_tool(tmp_path / "local", "tool")

    assert find_executable("tool", search_dirs=[tmp_path / "missing", tmp_path / "local"]) == str(local)
    assert find_executable("tool") == str(path_bin / "tool")
    assert find_executable("tool", use_path=False) is None


def test_settings_defaults_and_validation(tmp_path: Path) -> None:
    settings = HookSettings()
    assert settings.state_dir == default_state_dir()
    assert settings.timeout is None
    assert HookSettings(state_dir="").state_dir == default_state_dir()
    assert HookSettings(state_dir=str(tmp_path)).state_dir == tmp_path

    with pytest.raises(ValidationError):
        HookSettings(timeout=0)


def test_logger_is_silent_unless_enabled() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, highlight=False, width=200)

    HookLogger(enabled=False, console=console).debug("tool=ruff status=missing")
    assert buffer.getvalue() == ""

    logger = HookLogger(enabled=True, console=console)
    logger.debug("tool=ruff status=missing")
    logger.warn("npm could not be started")

    lines = buffer.getvalue().splitlines()
    assert lines == ["[hooklint] tool=ruff status=missing", "npm could not be started"]


def test_build_logger_follows_trace_flag() -> None:
    assert not build_logger(trace=False).enabled
    traced = build_logger(trace=True)
    assert traced.enabled
    assert traced.console is get_console()
    assert traced.console.no_color
