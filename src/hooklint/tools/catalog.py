# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Ordered lint tool cascades for every supported ecosystem.

Each ecosystem owns a :class:`Toolchain` listing :class:`ToolCandidate`
records in preference order. Adding a tool or ecosystem is a change to the
data in :data:`TOOLCHAINS`; the dispatcher never branches on tool names.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import NODE_BIN_DIR, PYTHON_VENV_BIN_DIRS
from ..models import Ecosystem

FILE_PLACEHOLDER: Final[str] = "{file}"

ToolScope = Literal["file", "project"]


class ToolCandidate(BaseModel):
    """One entry of an ecosystem's tool cascade."""

    model_config = ConfigDict(frozen=True)

    name: str
    executable: str
    args: tuple[str, ...] = ()
    lenient_args: tuple[str, ...] = ()
    wrapper: str | None = None
    local_dirs: tuple[str, ...] = ()
    search_path: bool = True
    requires: tuple[str, ...] = ()
    excluded_by: tuple[str, ...] = ()
    not_configured: tuple[str, ...] = ()

    @field_validator(
        "args",
        "lenient_args",
        "local_dirs",
        "requires",
        "excluded_by",
        "not_configured",
        mode="before",
    )
    @classmethod
    def _coerce_strings(cls, value: Sequence[str] | str | None) -> tuple[str, ...]:
        """Normalise string collections into tuples.

        Args:
            value: Raw value supplied for a tuple field.

        Returns:
            tuple[str, ...]: Normalised tuple of strings.

        Raises:
            TypeError: If ``value`` is neither ``None``, a string, nor a sequence.
        """

        if value is None:
            return ()
        if isinstance(value, str):
            return (value,)
        if isinstance(value, Sequence):
            return tuple(str(item) for item in value)
        raise TypeError("expected a sequence of strings")

    @property
    def probes_by_running(self) -> bool:
        """Return whether availability is only known after running the tool."""

        return bool(self.not_configured)

    def is_eligible(self, root: Path) -> bool:
        """Return whether the project provides the files this tool requires.

        Args:
            root: Project root directory.

        Returns:
            bool: ``True`` when no excluding marker exists and either no marker
            is required or any required marker exists.
        """

        if any((root / marker).exists() for marker in self.excluded_by):
            return False
        if not self.requires:
            return True
        return any((root / marker).exists() for marker in self.requires)

    def display_name(self, executable: str) -> str:
        """Return the tool name reported for a run of ``executable``.

        A project wrapper replaces the executable in the name, so messages
        name the binary that actually ran.

        Args:
            executable: Path returned by executable resolution.

        Returns:
            str: Name used in decision messages.
        """

        if self.wrapper and Path(executable).name == Path(self.wrapper).name:
            return self.name.replace(self.executable, f"./{self.wrapper}", 1)
        return self.name

    def build_args(self, target: str, *, lenient: bool) -> list[str]:
        """Return command arguments with ``{file}`` replaced by ``target``.

        Args:
            target: File path substituted into the template.
            lenient: Whether the lenient overlay should be appended.

        Returns:
            list[str]: Arguments passed after the executable.
        """

        built = [arg.replace(FILE_PLACEHOLDER, target) for arg in self.args]
        if lenient:
            built.extend(self.lenient_args)
        return built

    def is_not_configured(self, output: str) -> bool:
        """Return whether ``output`` says the tool is not configured."""

        return any(marker in output for marker in self.not_configured)


class Toolchain(BaseModel):
    """Ordered candidates and hint messages for one ecosystem."""

    model_config = ConfigDict(frozen=True)

    ecosystem: Ecosystem
    scope: ToolScope = "file"
    filter_output: bool = False
    candidates: tuple[ToolCandidate, ...]
    missing_hint: str
    marker_hints: Mapping[str, str] = Field(default_factory=dict)

    def hint_for(self, root: Path, label: str) -> str:
        """Return the "no linter found" message for ``root``.

        Args:
            root: Project root directory.
            label: File path or batch label named in the message.

        Returns:
            str: Hint tailored to the project's manifest when one applies.
        """

        for marker, hint in self.marker_hints.items():
            if (root / marker).exists():
                return hint.format(label=label)
        return self.missing_hint.format(label=label)


_MAVEN_MISSING: Final[str] = "Unknown lifecycle phase"
_GRADLE_FILES: Final[tuple[str, ...]] = ("build.gradle", "build.gradle.kts")

TOOLCHAINS: Final[Mapping[Ecosystem, Toolchain]] = {
    Ecosystem.WEB: Toolchain(
        ecosystem=Ecosystem.WEB,
        candidates=(
            ToolCandidate(
                name="oxlint",
                executable="oxlint",
                args=(FILE_PLACEHOLDER,),
                lenient_args=(
                    "--allow",
                    "no-unused-vars",
                    "--allow",
                    "@typescript-eslint/no-unused-vars",
                    "--allow",
                    "no-undef",
                ),
                local_dirs=(NODE_BIN_DIR,),
                search_path=False,
            ),
            ToolCandidate(
                name="biome",
                executable="biome",
                args=("lint", FILE_PLACEHOLDER),
                lenient_args=(
                    "--skip=correctness/noUnusedVariables",
                    "--skip=correctness/noUnusedImports",
                    "--skip=correctness/noUndeclaredVariables",
                ),
                local_dirs=(NODE_BIN_DIR,),
                search_path=False,
            ),
            ToolCandidate(
                name="eslint",
                executable="eslint",
                args=(FILE_PLACEHOLDER,),
                lenient_args=(
                    "--rule",
                    "no-unused-vars: off",
                    "--rule",
                    "@typescript-eslint/no-unused-vars: off",
                    "--rule",
                    "no-undef: off",
                    "--rule",
                    "react/jsx-no-undef: off",
                ),
                local_dirs=(NODE_BIN_DIR,),
                search_path=False,
            ),
            ToolCandidate(
                name="npm run lint",
                executable="npm",
                args=("run", "lint", "--if-present", "--", FILE_PLACEHOLDER),
                not_configured=("Missing script", "npm error"),
            ),
        ),
        missing_hint="no linter found for {label}.",
    ),
    Ecosystem.SYSTEMS: Toolchain(
        ecosystem=Ecosystem.SYSTEMS,
        scope="project",
        filter_output=True,
        candidates=(
            ToolCandidate(
                name="clippy",
                executable="cargo",
                args=("clippy", "--message-format=short", "--", "-D", "warnings"),
                lenient_args=("-A", "unused_variables", "-A", "unused_imports", "-A", "dead_code"),
            ),
        ),
        missing_hint="no Rust linter found for {label}. Install the Rust toolchain with clippy: rustup component add clippy",
    ),
    Ecosystem.SCRIPTING: Toolchain(
        ecosystem=Ecosystem.SCRIPTING,
        candidates=(
            ToolCandidate(
                name="ruff",
                executable="ruff",
                args=("check", "--output-format=concise", FILE_PLACEHOLDER),
                lenient_args=("--ignore", "F841,F401,F821"),
                local_dirs=PYTHON_VENV_BIN_DIRS,
            ),
            # mypy has no unused-variable checks to relax.
            ToolCandidate(
                name="mypy",
                executable="mypy",
                args=(FILE_PLACEHOLDER,),
                local_dirs=PYTHON_VENV_BIN_DIRS,
            ),
            ToolCandidate(
                name="pylint",
                executable="pylint",
                args=("--output-format=text", FILE_PLACEHOLDER),
                lenient_args=("--disable=W0611,W0612,E0602",),
                local_dirs=PYTHON_VENV_BIN_DIRS,
            ),
            ToolCandidate(
                name="flake8",
                executable="flake8",
                args=(FILE_PLACEHOLDER,),
                lenient_args=("--extend-ignore=F841,F401,F821",),
                local_dirs=PYTHON_VENV_BIN_DIRS,
            ),
        ),
        missing_hint="no Python linter found for {label}. Install ruff for best performance: pip install ruff",
    ),
    # PMD and SpotBugs have no command-line rule suppression; lenient is ignored.
    # A pom.xml makes the project Maven-only even when Gradle files exist.
    Ecosystem.JVM: Toolchain(
        ecosystem=Ecosystem.JVM,
        scope="project",
        candidates=(
            ToolCandidate(
                name="mvn pmd:check",
                executable="mvn",
                args=("pmd:check", "-q"),
                requires=("pom.xml",),
                not_configured=(_MAVEN_MISSING, "No plugin found for prefix 'pmd'"),
            ),
            ToolCandidate(
                name="mvn spotbugs:check",
                executable="mvn",
                args=("spotbugs:check", "-q"),
                requires=("pom.xml",),
                not_configured=(_MAVEN_MISSING, "No plugin found for prefix 'spotbugs'"),
            ),
            ToolCandidate(
                name="gradle pmdMain",
                executable="gradle",
                wrapper="gradlew",
                args=("pmdMain", "-q"),
                requires=_GRADLE_FILES,
                excluded_by=("pom.xml",),
                not_configured=("Task 'pmdMain' not found",),
            ),
            ToolCandidate(
                name="gradle spotbugsMain",
                executable="gradle",
                wrapper="gradlew",
                args=("spotbugsMain", "-q"),
                requires=_GRADLE_FILES,
                excluded_by=("pom.xml",),
                not_configured=("Task 'spotbugsMain' not found",),
            ),
        ),
        missing_hint="no Java build tool found for {label}. Add pom.xml or build.gradle.",
        marker_hints={
            "pom.xml": (
                "no Java linter configured for {label}. Add maven-pmd-plugin or spotbugs-maven-plugin to pom.xml."
            ),
            "build.gradle": "no Java linter configured for {label}. Add pmd or spotbugs plugin to build.gradle.",
            "build.gradle.kts": "no Java linter configured for {label}. Add pmd or spotbugs plugin to build.gradle.kts.",
        },
    ),
    Ecosystem.COMPILED: Toolchain(
        ecosystem=Ecosystem.COMPILED,
        candidates=(
            ToolCandidate(
                name="golangci-lint",
                executable="golangci-lint",
                args=("run", "--fast", FILE_PLACEHOLDER),
                lenient_args=("--disable=unused",),
            ),
            ToolCandidate(
                name="staticcheck",
                executable="staticcheck",
                args=(FILE_PLACEHOLDER,),
            ),
            ToolCandidate(
                name="go vet",
                executable="go",
                args=("vet", FILE_PLACEHOLDER),
            ),
        ),
        missing_hint=(
            "no Go linter found for {label}. Install golangci-lint for best results: https://golangci-lint.run"
        ),
    ),
}


def toolchain_for(ecosystem: Ecosystem) -> Toolchain:
    """Return the toolchain registered for ``ecosystem``.

    Args:
        ecosystem: Ecosystem whose cascade is requested.

    Returns:
        Toolchain: Registered cascade.

    Raises:
        KeyError: If no toolchain is registered for the ecosystem.
    """

    return TOOLCHAINS[ecosystem]


__all__ = [
    "FILE_PLACEHOLDER",
    "TOOLCHAINS",
    "ToolCandidate",
    "ToolScope",
    "Toolchain",
    "toolchain_for",
]
