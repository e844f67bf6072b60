# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Core package metadata for the hooklint edit hook."""

from __future__ import annotations

from importlib import metadata

__all__ = ["__version__"]

try:
    __version__ = metadata.version("hooklint")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
