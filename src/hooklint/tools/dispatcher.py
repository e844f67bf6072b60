# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Select and run one lint tool for a resolved project.

The dispatcher walks the ecosystem's ordered cascade from
:mod:`hooklint.tools.catalog`:

* candidates whose required manifest is missing, or whose executable cannot
  be found, are passed over;
* the first remaining candidate is used exclusively. If it crashes or cannot
  be spawned that is reported as a lint failure rather than a reason to try
  the next tool;
* candidates declaring "not configured" markers (package-manager scripts and
  build plugins) are run to find out whether they exist, and the cascade
  continues when their output carries a marker;
* when nothing is usable the outcome is a passing ``skipped`` result with the
  toolchain's hint, so a missing linter never blocks the host.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..logging import HookLogger
from ..models import Ecosystem, LintOutcome
from ..process import find_executable, run_command
from .catalog import ToolCandidate, Toolchain, toolchain_for
from .filters import filter_output_for_files


@dataclass(frozen=True, slots=True)
class ToolRun:
    """Captured result of one tool execution."""

    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        """Return whether the tool exited successfully."""

        return self.exit_code == 0

    @property
    def combined(self) -> str:
        """Return stdout followed by stderr."""

        return f"{self.stdout}{self.stderr}"


def batch_label(file_paths: Sequence[str]) -> str:
    """Return the label naming a single file or ``"N files"``.

    Args:
        file_paths: Files covered by one tool run.

    Returns:
        str: Label used in decision messages.
    """

    if len(file_paths) == 1:
        return file_paths[0]
    return f"{len(file_paths)} files"


def combine_output(stdout: str, stderr: str) -> str:
    """Join non-empty stdout and stderr with a newline and trim the result.

    Args:
        stdout: Captured standard output.
        stderr: Captured standard error.

    Returns:
        str: Trimmed message text.
    """

    if stdout and stderr:
        return f"{stdout}\n{stderr}".strip()
    return (stdout or stderr).strip()


def resolve_executable(candidate: ToolCandidate, root: Path) -> str | None:
    """Return the executable for ``candidate`` inside ``root`` when present.

    A project-local wrapper wins, then the ecosystem-local install
    directories, then the shell search path when the candidate allows it.

    Args:
        candidate: Tool candidate being probed.
        root: Project root directory.

    Returns:
        str | None: Executable path, or ``None`` when the tool is absent.
    """

    if candidate.wrapper:
        wrapper = root / candidate.wrapper
        if wrapper.is_file():
            return str(wrapper.absolute())
    return find_executable(
        candidate.executable,
        search_dirs=[root / directory for directory in candidate.local_dirs],
        use_path=candidate.search_path,
    )


class LintDispatcher:
    """Run the preferred available tool for a project."""

    def __init__(self, *, logger: HookLogger | None = None, timeout: float | None = None) -> None:
        """Initialise the dispatcher.

        Args:
            logger: Trace logger; a silent logger is used when omitted.
            timeout: Optional per-tool limit in seconds; ``None`` waits forever.
        """

        self.logger = logger or HookLogger()
        self.timeout = timeout

    def dispatch(
        self,
        file_paths: Sequence[str],
        project_root: str,
        ecosystem: Ecosystem,
        *,
        lenient: bool = False,
    ) -> LintOutcome:
        """Lint ``file_paths`` with the first usable tool of ``ecosystem``.

        File-scoped toolchains lint exactly one file per call;
        project-scoped toolchains run once for the whole batch.

        Args:
            file_paths: Non-empty list of files sharing ``project_root``.
            project_root: Resolved project root directory.
            ecosystem: Ecosystem owning the files.
            lenient: Whether to relax unused/undefined rule categories.

        Returns:
            LintOutcome: Normalised result of the selected tool.

        Raises:
            ValueError: If ``file_paths`` is empty, or holds several files for a
                file-scoped toolchain.
        """

        if not file_paths:
            raise ValueError("dispatch requires at least one file path")
        toolchain = toolchain_for(ecosystem)
        if toolchain.scope == "file" and len(file_paths) > 1:
            raise ValueError(f"{ecosystem.value} toolchain lints one file per call, got {len(file_paths)}")
        root = Path(project_root)
        label = batch_label(file_paths)
        target = file_paths[0]

        for candidate in toolchain.candidates:
            if not candidate.is_eligible(root):
                continue
            executable = resolve_executable(candidate, root)
            if executable is None:
                self.logger.debug(f"tool={candidate.name} status=missing")
                continue

            args = candidate.build_args(target, lenient=lenient)
            tool_name = candidate.display_name(executable)
            self.logger.debug(f"tool={candidate.name} cmd={executable} cwd={project_root} files={len(file_paths)}")
            try:
                run = self._execute([executable, *args], cwd=root)
            except OSError as exc:
                if candidate.probes_by_running:
                    self.logger.warn(f"{candidate.name} could not be started: {exc}")
                    continue
                return LintOutcome(tool_name=tool_name, label=label, passed=False, message=str(exc))

            if candidate.probes_by_running and candidate.is_not_configured(run.combined):
                self.logger.debug(f"tool={candidate.name} status=not-configured")
                continue
            return self._normalise(tool_name, toolchain, run, file_paths, project_root, label)

        return LintOutcome(
            tool_name="",
            label=label,
            passed=True,
            message=toolchain.hint_for(root, label),
            skipped=True,
        )

    def _execute(self, command: list[str], *, cwd: Path) -> ToolRun:
        completed = run_command(command, cwd=cwd, timeout=self.timeout)
        return ToolRun(exit_code=completed.returncode, stdout=completed.stdout, stderr=completed.stderr)

    @staticmethod
    def _normalise(
        tool_name: str,
        toolchain: Toolchain,
        run: ToolRun,
        file_paths: Sequence[str],
        project_root: str,
        label: str,
    ) -> LintOutcome:
        """Convert a tool run into a :class:`LintOutcome`.

        Output of filtering toolchains is reduced to the requested files; such
        a run passes when the tool succeeded or nothing relevant remains.

        Args:
            tool_name: Name of the tool that produced ``run``.
            toolchain: Toolchain owning the candidate.
            run: Captured execution result.
            file_paths: Requested files.
            project_root: Root the tool ran in.
            label: Label naming the requested files.

        Returns:
            LintOutcome: Normalised outcome.
        """

        if toolchain.filter_output:
            relevant = filter_output_for_files(run.stdout, run.stderr, file_paths, project_root).strip()
            passed = run.succeeded or not relevant
            return LintOutcome(tool_name=tool_name, label=label, passed=passed, message=relevant)
        if run.succeeded:
            return LintOutcome(tool_name=tool_name, label=label, passed=True)
        return LintOutcome(
            tool_name=tool_name,
            label=label,
            passed=False,
            message=combine_output(run.stdout, run.stderr),
        )


def dispatch(
    file_paths: Sequence[str],
    project_root: str,
    ecosystem: Ecosystem,
    lenient: bool = False,
) -> LintOutcome:
    """Run :meth:`LintDispatcher.dispatch` with default settings."""

    return LintDispatcher().dispatch(file_paths, project_root, ecosystem, lenient=lenient)


__all__ = [
    "LintDispatcher",
    "ToolRun",
    "batch_label",
    "combine_output",
    "dispatch",
    "resolve_executable",
]
