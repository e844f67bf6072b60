# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Drive the three invocation modes from payload to decision."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .config import HookSettings, RunMode
from .constants import AGGREGATE_SEPARATOR
from .extract import extract_file_path, extract_reason, extract_session_id
from .logging import HookLogger
from .models import Decision, Ecosystem, ProjectDescriptor
from .project import resolve
from .reporting import is_block_line, outcome_decision, prefixed, render_decision
from .session import SessionStore
from .tools.catalog import toolchain_for
from .tools.dispatcher import LintDispatcher, batch_label

Resolver = Callable[[str], ProjectDescriptor | None]


@dataclass(slots=True)
class LintGroup:
    """Files linted together by one dispatcher call."""

    root: str
    ecosystem: Ecosystem
    files: list[str] = field(default_factory=list)


class HookRunner:
    """Turn one event payload into one decision according to ``settings``."""

    def __init__(
        self,
        settings: HookSettings,
        *,
        logger: HookLogger | None = None,
        store: SessionStore | None = None,
        dispatcher: LintDispatcher | None = None,
        resolver: Resolver = resolve,
    ) -> None:
        self.settings = settings
        self.logger = logger or HookLogger()
        self.store = store or SessionStore(settings.state_dir)
        self.dispatcher = dispatcher or LintDispatcher(logger=self.logger, timeout=settings.timeout)
        self.resolver = resolver

    def run(self, payload: str) -> Decision:
        """Return the decision for ``payload`` in the configured mode.

        Args:
            payload: Raw event text read from standard input.

        Returns:
            Decision: Continue or block verdict.
        """

        self.logger.debug(f"mode={self.settings.mode.value} lenient={self.settings.lenient}")
        if self.settings.mode is RunMode.COLLECT:
            return self.collect(payload)
        if self.settings.mode is RunMode.LINT_COLLECTED:
            return self.lint_collected(payload)
        return self.lint(payload)

    def lint(self, payload: str) -> Decision:
        """Lint the single file named in ``payload`` immediately."""

        file_path = extract_file_path(payload)
        if not file_path:
            return Decision.proceed(prefixed("no file_path provided, skipping lint hook."))

        project = self.resolver(file_path)
        if project is None:
            return Decision.proceed(
                prefixed(f"skipping lint: unsupported file type or no project found for {file_path}."),
            )
        self.logger.debug(f"file={file_path} root={project.root} ecosystem={project.ecosystem.value}")
        outcome = self.dispatcher.dispatch([file_path], project.root, project.ecosystem, lenient=self.settings.lenient)
        return outcome_decision(outcome)

    def collect(self, payload: str) -> Decision:
        """Record the payload's file for a later batched lint pass."""

        session_id = extract_session_id(payload)
        if not session_id:
            return Decision.proceed(prefixed("no session_id, skipping collect."))
        file_path = extract_file_path(payload)
        if not file_path:
            return Decision.proceed(prefixed("no file_path provided, skipping collect."))

        self.store.record(session_id, file_path)
        self.logger.debug(f"session={session_id} pending={len(self.store.pending(session_id))}")
        return Decision.proceed(prefixed(f"collected {file_path} for deferred lint."))

    def lint_collected(self, payload: str) -> Decision:
        """Drain the session's recorded files and lint them grouped by project.

        Group failures are folded into one block reason instead of aborting
        the remaining groups; files that no longer resolve are skipped.

        Args:
            payload: Raw event text carrying the session identifier.

        Returns:
            Decision: Aggregated continue or block verdict.
        """

        session_id = extract_session_id(payload)
        if not session_id:
            return Decision.proceed(prefixed("no session_id, skipping lint-collected."))

        paths = self.store.drain(session_id)
        if not paths:
            return Decision.proceed(prefixed("no files collected, skipping lint."))

        groups = self._group(paths)
        self.logger.info(f"linting {len(paths)} collected file(s) in {len(groups)} group(s)")
        errors: list[str] = []
        for group in groups:
            reason = self._lint_group(group)
            if reason is not None:
                errors.append(reason)

        if errors:
            return Decision.block(AGGREGATE_SEPARATOR.join(errors))
        return Decision.proceed(prefixed(f"all {len(paths)} collected file(s) passed lint."))

    def _group(self, paths: list[str]) -> list[LintGroup]:
        """Partition ``paths`` into dispatcher calls in first-seen order.

        Project-scoped toolchains share one group per root; file-scoped
        toolchains get one group per file.

        Args:
            paths: Drained file paths.

        Returns:
            list[LintGroup]: Groups to lint.
        """

        groups: list[LintGroup] = []
        shared: dict[tuple[str, Ecosystem], LintGroup] = {}
        for file_path in paths:
            project = self.resolver(file_path)
            if project is None:
                self.logger.debug(f"file={file_path} status=unresolved")
                continue
            if toolchain_for(project.ecosystem).scope == "project":
                key = (project.root, project.ecosystem)
                group = shared.get(key)
                if group is None:
                    group = shared[key] = LintGroup(root=project.root, ecosystem=project.ecosystem)
                    groups.append(group)
                group.files.append(file_path)
            else:
                groups.append(LintGroup(root=project.root, ecosystem=project.ecosystem, files=[file_path]))
        return groups

    def _lint_group(self, group: LintGroup) -> str | None:
        """Return the block reason for ``group``, or ``None`` when it passes."""

        try:
            outcome = self.dispatcher.dispatch(
                group.files,
                group.root,
                group.ecosystem,
                lenient=self.settings.lenient,
            )
        except Exception as exc:  # noqa: BLE001 - folded into the aggregate reason
            return prefixed(f"error linting {batch_label(group.files)}: {exc}")
        line = render_decision(outcome_decision(outcome), verbose=False)
        if not is_block_line(line):
            return None
        return extract_reason(line) or line


__all__ = ["HookRunner", "LintGroup"]
