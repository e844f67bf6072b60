# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Lint tool catalog, selection, and output filtering."""

from __future__ import annotations

from .catalog import TOOLCHAINS, ToolCandidate, Toolchain, toolchain_for
from .dispatcher import LintDispatcher, batch_label, combine_output, dispatch
from .filters import filter_output_for_files

__all__ = [
    "LintDispatcher",
    "TOOLCHAINS",
    "ToolCandidate",
    "Toolchain",
    "batch_label",
    "combine_output",
    "dispatch",
    "filter_output_for_files",
    "toolchain_for",
]
