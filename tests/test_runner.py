# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors

"""Tests for the mode runner using in-memory collaborators."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from hooklint.config import HookSettings, RunMode
from hooklint.models import Ecosystem, LintOutcome, ProjectDescriptor
from hooklint.runner import HookRunner
from hooklint.session import SessionStore

PROJECTS = {
    "/py/a.py": ProjectDescriptor("/py", Ecosystem.SCRIPTING),
    "/py/b.py": ProjectDescriptor("/py", Ecosystem.SCRIPTING),
    "/rs/src/a.rs": ProjectDescriptor("/rs", Ecosystem.SYSTEMS),
    "/rs/src/b.rs": ProjectDescriptor("/rs", Ecosystem.SYSTEMS),
    "/go/main.go": ProjectDescriptor("/go", Ecosystem.COMPILED),
    "/jv/src/App.java": ProjectDescriptor("/jv", Ecosystem.JVM),
    "/jv/src/Util.java": ProjectDescriptor("/jv", Ecosystem.JVM),
}


class FakeDispatcher:
    """Record dispatch calls and answer from a table of failures."""

    def __init__(self, failures: dict[str, str] | None = None, errors: dict[str, Exception] | None = None) -> None:
        self.failures = failures or {}
        self.errors = errors or {}
        self.calls: list[tuple[list[str], str, Ecosystem, bool]] = []

    def dispatch(
        self,
        file_paths: Sequence[str],
        project_root: str,
        ecosystem: Ecosystem,
        *,
        lenient: bool = False,
    ) -> LintOutcome:
        files = list(file_paths)
        self.calls.append((files, project_root, ecosystem, lenient))
        label = files[0] if len(files) == 1 else f"{len(files)} files"
        if files[0] in self.errors:
            raise self.errors[files[0]]
        if files[0] in self.failures:
            return LintOutcome(tool_name="fake", label=label, passed=False, message=self.failures[files[0]])
        return LintOutcome(tool_name="fake", label=label, passed=True)


def _payload(file_path: str | None = None, session_id: str | None = None) -> str:
    body: dict[str, object] = {}
    if session_id is not None:
        body["session_id"] = session_id
    if file_path is not None:
        body["tool_input"] = {"file_path": file_path}
    return json.dumps(body)


def _runner(
    tmp_path: Path,
    dispatcher: FakeDispatcher,
    mode: RunMode = RunMode.LINT,
    *,
    lenient: bool = False,
) -> HookRunner:
    settings = HookSettings(mode=mode, lenient=lenient, state_dir=tmp_path)
    return HookRunner(settings, dispatcher=dispatcher, resolver=PROJECTS.get)  # type: ignore[arg-type]


def test_lint_without_file_path(tmp_path: Path) -> None:
    decision = _runner(tmp_path, FakeDispatcher()).run("{}")
    assert not decision.blocked
    assert decision.message == "[hooklint] no file_path provided, skipping lint hook."


def test_lint_unresolved_file(tmp_path: Path) -> None:
    dispatcher = FakeDispatcher()
    decision = _runner(tmp_path, dispatcher).run(_payload("/docs/readme.md"))
    assert decision.message == "[hooklint] skipping lint: unsupported file type or no project found for /docs/readme.md."
    assert dispatcher.calls == []


def test_lint_passes_and_forwards_lenient(tmp_path: Path) -> None:
    dispatcher = FakeDispatcher()
    decision = _runner(tmp_path, dispatcher, lenient=True).run(_payload("/py/a.py"))
    assert not decision.blocked
    assert decision.message == "[hooklint] lint passed for /py/a.py using fake."
    assert dispatcher.calls == [(["/py/a.py"], "/py", Ecosystem.SCRIPTING, True)]


def test_lint_failure_blocks(tmp_path: Path) -> None:
    decision = _runner(tmp_path, FakeDispatcher(failures={"/go/main.go": "vet: bad"})).run(_payload("/go/main.go"))
    assert decision.blocked
    assert decision.message == "[hooklint] lint errors in /go/main.go using fake:\n\nvet: bad\n\nFix lint errors."


def test_collect_requires_session_and_file(tmp_path: Path) -> None:
    runner = _runner(tmp_path, FakeDispatcher(), RunMode.COLLECT)
    assert runner.run(_payload("/py/a.py")).message == "[hooklint] no session_id, skipping collect."
    assert runner.run(_payload(session_id="s1")).message == "[hooklint] no file_path provided, skipping collect."


def test_collect_records_without_linting(tmp_path: Path) -> None:
    dispatcher = FakeDispatcher()
    runner = _runner(tmp_path, dispatcher, RunMode.COLLECT)

    decision = runner.run(_payload("/py/a.py", "s1"))

    assert not decision.blocked
    assert decision.message == "[hooklint] collected /py/a.py for deferred lint."
    assert dispatcher.calls == []
    assert SessionStore(tmp_path).pending("s1") == ["/py/a.py"]


def test_lint_collected_requires_session(tmp_path: Path) -> None:
    decision = _runner(tmp_path, FakeDispatcher(), RunMode.LINT_COLLECTED).run("{}")
    assert decision.message == "[hooklint] no session_id, skipping lint-collected."


def test_lint_collected_with_nothing_recorded(tmp_path: Path) -> None:
    decision = _runner(tmp_path, FakeDispatcher(), RunMode.LINT_COLLECTED).run(_payload(session_id="s1"))
    assert decision.message == "[hooklint] no files collected, skipping lint."


def test_lint_collected_groups_and_passes(tmp_path: Path) -> None:
    store = SessionStore(tmp_path)
    for path in ("/rs/src/a.rs", "/py/a.py", "/rs/src/b.rs", "/docs/notes.md", "/py/b.py"):
        store.record("s1", path)
    dispatcher = FakeDispatcher()

    decision = _runner(tmp_path, dispatcher, RunMode.LINT_COLLECTED).run(_payload(session_id="s1"))

    assert not decision.blocked
    assert decision.message == "[hooklint] all 5 collected file(s) passed lint."
    assert [call[0] for call in dispatcher.calls] == [
        ["/rs/src/a.rs", "/rs/src/b.rs"],
        ["/py/a.py"],
        ["/py/b.py"],
    ]
    assert store.pending("s1") == []


def test_lint_collected_aggregates_failures(tmp_path: Path) -> None:
    store = SessionStore(tmp_path)
    for path in ("/py/a.py", "/go/main.go", "/py/b.py"):
        store.record("s1", path)
    dispatcher = FakeDispatcher(
        failures={"/py/a.py": 'a.py:1: "x" unused'},
        errors={"/py/b.py": RuntimeError("boom")},
    )

    decision = _runner(tmp_path, dispatcher, RunMode.LINT_COLLECTED).run(_payload(session_id="s1"))

    assert decision.blocked
    assert decision.message == (
        '[hooklint] lint errors in /py/a.py using fake:\n\na.py:1: "x" unused\n\nFix lint errors.'
        "\n\n---\n\n"
        "[hooklint] error linting /py/b.py: boom"
    )
    assert len(dispatcher.calls) == 3


def test_lint_collected_runs_java_once_per_root(tmp_path: Path) -> None:
    store = SessionStore(tmp_path)
    for path in ("/jv/src/App.java", "/go/main.go", "/jv/src/Util.java"):
        store.record("s1", path)
    dispatcher = FakeDispatcher(failures={"/jv/src/App.java": "PMD: 1 violation"})

    decision = _runner(tmp_path, dispatcher, RunMode.LINT_COLLECTED).run(_payload(session_id="s1"))

    assert dispatcher.calls == [
        (["/jv/src/App.java", "/jv/src/Util.java"], "/jv", Ecosystem.JVM, False),
        (["/go/main.go"], "/go", Ecosystem.COMPILED, False),
    ]
    assert decision.blocked
    assert decision.message == "[hooklint] lint errors in 2 files using fake:\n\nPMD: 1 violation\n\nFix lint errors."


def test_lint_collected_drains_once(tmp_path: Path) -> None:
    SessionStore(tmp_path).record("s1", "/py/a.py")
    runner = _runner(tmp_path, FakeDispatcher(), RunMode.LINT_COLLECTED)

    assert runner.run(_payload(session_id="s1")).message == "[hooklint] all 1 collected file(s) passed lint."
    assert runner.run(_payload(session_id="s1")).message == "[hooklint] no files collected, skipping lint."


def test_settings_mode_precedence() -> None:
    assert HookSettings.from_flags(collect=True, lint_collected=True).mode is RunMode.COLLECT
    assert HookSettings.from_flags(lint_collected=True).mode is RunMode.LINT_COLLECTED
    assert HookSettings.from_flags().mode is RunMode.LINT
