# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Shared constants used across hooklint modules."""

from __future__ import annotations

from typing import Final

from .models import Ecosystem

MESSAGE_PREFIX: Final[str] = "[hooklint]"

ECOSYSTEM_EXTENSIONS: Final[dict[Ecosystem, frozenset[str]]] = {
    Ecosystem.WEB: frozenset({".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"}),
    Ecosystem.SYSTEMS: frozenset({".rs"}),
    Ecosystem.SCRIPTING: frozenset({".py", ".pyi"}),
    Ecosystem.JVM: frozenset({".java"}),
    Ecosystem.COMPILED: frozenset({".go"}),
}

# Ordered: the first marker found in a directory is reported, any marker claims it.
ECOSYSTEM_MARKERS: Final[dict[Ecosystem, tuple[str, ...]]] = {
    Ecosystem.SYSTEMS: ("Cargo.toml",),
    Ecosystem.SCRIPTING: (
        "pyproject.toml",
        "setup.py",
        "setup.cfg",
        "requirements.txt",
        "Pipfile",
    ),
    Ecosystem.JVM: ("pom.xml", "build.gradle", "build.gradle.kts"),
    Ecosystem.COMPILED: ("go.mod",),
}

NODE_BIN_DIR: Final[str] = "node_modules/.bin"
PYTHON_VENV_BIN_DIRS: Final[tuple[str, ...]] = (".venv/bin", "venv/bin", ".env/bin", "env/bin")

SESSION_FILE_PREFIX: Final[str] = "hooklint-"
SESSION_FILE_SUFFIX: Final[str] = ".txt"

AGGREGATE_SEPARATOR: Final[str] = "\n\n---\n\n"

ENV_DEBUG: Final[str] = "HOOKLINT_DEBUG"
ENV_LENIENT: Final[str] = "HOOKLINT_LENIENT"
ENV_TRACE: Final[str] = "HOOKLINT_TRACE"
ENV_STATE_DIR: Final[str] = "HOOKLINT_STATE_DIR"
ENV_TIMEOUT: Final[str] = "HOOKLINT_TIMEOUT"

__all__ = [
    "AGGREGATE_SEPARATOR",
    "ECOSYSTEM_EXTENSIONS",
    "ECOSYSTEM_MARKERS",
    "ENV_DEBUG",
    "ENV_LENIENT",
    "ENV_STATE_DIR",
    "ENV_TIMEOUT",
    "ENV_TRACE",
    "MESSAGE_PREFIX",
    "NODE_BIN_DIR",
    "PYTHON_VENV_BIN_DIRS",
    "SESSION_FILE_PREFIX",
    "SESSION_FILE_SUFFIX",
]
