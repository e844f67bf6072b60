# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Settings model describing a single hook invocation."""

from __future__ import annotations

import tempfile
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RunMode(str, Enum):
    """Invocation modes selected by command-line flags."""

    LINT = "lint"
    COLLECT = "collect"
    LINT_COLLECTED = "lint_collected"


def default_state_dir() -> Path:
    """Return the directory holding session records by default."""

    return Path(tempfile.gettempdir())


class HookSettings(BaseModel):
    """Resolved configuration for one hook run."""

    model_config = ConfigDict(frozen=True)

    mode: RunMode = RunMode.LINT
    verbose: bool = False
    lenient: bool = False
    trace: bool = False
    state_dir: Path = Field(default_factory=default_state_dir)
    timeout: float | None = None

    @field_validator("state_dir", mode="before")
    @classmethod
    def _coerce_state_dir(cls, value: Path | str | None) -> Path:
        """Fall back to the temporary directory when no state dir is given.

        Args:
            value: Raw state directory supplied by the caller.

        Returns:
            Path: Directory used for session records.
        """

        if value is None or value == "":
            return default_state_dir()
        return Path(value).expanduser()

    @field_validator("timeout")
    @classmethod
    def _check_timeout(cls, value: float | None) -> float | None:
        """Reject non-positive timeouts; ``None`` keeps tools unbounded.

        Args:
            value: Timeout in seconds.

        Returns:
            float | None: Validated timeout.

        Raises:
            ValueError: If ``value`` is zero or negative.
        """

        if value is not None and value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @classmethod
    def from_flags(
        cls,
        *,
        collect: bool = False,
        lint_collected: bool = False,
        **values: object,
    ) -> HookSettings:
        """Build settings from the mutually-selected mode flags.

        ``collect`` takes precedence when both mode flags are set.

        Args:
            collect: Whether the collect flag was passed.
            lint_collected: Whether the drain-and-lint flag was passed.
            **values: Remaining field values forwarded to the model.

        Returns:
            HookSettings: Validated settings instance.
        """

        if collect:
            mode = RunMode.COLLECT
        elif lint_collected:
            mode = RunMode.LINT_COLLECTED
        else:
            mode = RunMode.LINT
        return cls(mode=mode, **values)


__all__ = ["HookSettings", "RunMode", "default_state_dir"]
