# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Dataclasses describing projects, lint outcomes, and hook decisions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Ecosystem(str, Enum):
    """Language families with their own manifest convention and lint tools."""

    WEB = "web"
    SYSTEMS = "systems"
    SCRIPTING = "scripting"
    JVM = "jvm"
    COMPILED = "compiled"


@dataclass(frozen=True, slots=True)
class ProjectDescriptor:
    """Directory owning a source file together with its ecosystem."""

    root: str
    ecosystem: Ecosystem


@dataclass(frozen=True, slots=True)
class LintOutcome:
    """Normalised result of a single dispatcher execution.

    ``skipped`` marks the passing-shaped outcome produced when no linter is
    available for the project; ``message`` then carries the hint text.
    """

    tool_name: str
    label: str
    passed: bool
    message: str = ""
    skipped: bool = False


@dataclass(frozen=True, slots=True)
class Decision:
    """Continue or block verdict returned to the host for one invocation."""

    blocked: bool
    message: str | None = None

    @classmethod
    def proceed(cls, message: str | None = None) -> Decision:
        """Return a decision letting the host continue.

        Args:
            message: Optional informational text surfaced in verbose mode.

        Returns:
            Decision: Non-blocking decision.
        """

        return cls(blocked=False, message=message)

    @classmethod
    def block(cls, reason: str) -> Decision:
        """Return a decision asking the host to stop and address ``reason``.

        Args:
            reason: Text explaining why the host should not continue.

        Returns:
            Decision: Blocking decision.
        """

        return cls(blocked=True, message=reason)


__all__ = ["Decision", "Ecosystem", "LintOutcome", "ProjectDescriptor"]
