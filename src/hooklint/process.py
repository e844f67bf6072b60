# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Safe wrappers around ``subprocess`` execution."""

from __future__ import annotations

import shutil

# Bandit: subprocess usage is intentional—lint tools are launched from vetted
# catalog entries with argument lists and without ``shell=True``.
import subprocess  # nosec B404
from collections.abc import Sequence
from pathlib import Path
from subprocess import CompletedProcess
from typing import Final

TIMEOUT_EXIT_CODE: Final[int] = 124


class SubprocessExecutionError(RuntimeError):
    """Raised when a subprocess exits with a non-zero status while ``check`` is true."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        stdout: str | None,
        stderr: str | None,
    ) -> None:
        super().__init__(
            f"Command '{command[0]}' exited with status {returncode}. stderr: {stderr or '<none>'}",
        )
        self.command = tuple(command)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _normalize_args(args: Sequence[str]) -> list[str]:
    if not args:
        msg = "subprocess command requires at least one argument"
        raise ValueError(msg)

    head, *rest = args
    head_path = Path(head)
    if head_path.is_absolute():
        return [str(head_path), *rest]

    resolved = shutil.which(head)
    if resolved is None:
        msg = f"Executable '{head}' was not found on PATH"
        raise FileNotFoundError(msg)
    return [resolved, *rest]


def _ensure_text(value: str | bytes | None) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return value.decode(errors="replace")


def run_command(
    args: Sequence[str],
    *,
    cwd: Path | str | None = None,
    check: bool = False,
    timeout: float | None = None,
) -> CompletedProcess[str]:
    """Execute ``args`` with captured text output.

    Standard input is detached so tools never wait on the hook's own stdin.

    Args:
        args: Command and arguments; bare executables are resolved on ``PATH``.
        cwd: Working directory for the child process.
        check: Raise :class:`SubprocessExecutionError` on non-zero exit.
        timeout: Optional limit in seconds; ``None`` waits indefinitely.

    Returns:
        CompletedProcess[str]: Completed process with decoded output. A
        timed-out run reports exit status ``124`` and a timeout note on stderr.

    Raises:
        FileNotFoundError: If the executable cannot be resolved.
        OSError: If the child process cannot be spawned.
        SubprocessExecutionError: If ``check`` is set and the command fails.
    """

    normalized = _normalize_args(args)
    try:
        # Bandit: commands originate from the tool catalog; no shell expansion.
        completed: CompletedProcess[str] = subprocess.run(  # nosec B603
            normalized,
            cwd=str(cwd) if cwd is not None else None,
            check=False,
            capture_output=True,
            text=True,
            errors="replace",
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except subprocess.TimeoutExpired as exc:
        stderr = _ensure_text(exc.stderr)
        timeout_msg = f"Command timed out after {timeout:.1f}s" if timeout is not None else "Command timed out"
        completed = CompletedProcess(
            args=normalized,
            returncode=TIMEOUT_EXIT_CODE,
            stdout=_ensure_text(exc.stdout),
            stderr=f"{stderr}\n{timeout_msg}" if stderr else timeout_msg,
        )

    if check and completed.returncode != 0:
        raise SubprocessExecutionError(normalized, completed.returncode, completed.stdout, completed.stderr)
    return completed


def find_executable(name: str, *, search_dirs: Sequence[Path] = (), use_path: bool = True) -> str | None:
    """Locate ``name`` in ``search_dirs`` first, then on ``PATH``.

    Args:
        name: Executable file name.
        search_dirs: Directories checked in order before ``PATH``.
        use_path: Whether the shell search path is consulted.

    Returns:
        str | None: Path to the executable, or ``None`` when not found.
    """

    for directory in search_dirs:
        candidate = directory / name
        if candidate.is_file():
            return str(candidate.absolute())
    if use_path:
        return shutil.which(name)
    return None


__all__ = ["SubprocessExecutionError", "TIMEOUT_EXIT_CODE", "find_executable", "run_command"]
