# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Allow ``python -m hooklint`` to run the hook."""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
