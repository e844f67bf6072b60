# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The hooklint Authors
"""Command-line entry point invoked by the host for every edit event.

The command always exits successfully and always prints exactly one decision
line: any internal error becomes a continue decision carrying the error text,
so a broken lint hook never blocks the host's own workflow.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .config import HookSettings
from .constants import ENV_DEBUG, ENV_LENIENT, ENV_STATE_DIR, ENV_TIMEOUT, ENV_TRACE
from .logging import build_logger
from .models import Decision
from .reporting import prefixed, render_decision
from .runner import HookRunner

_CONTEXT_SETTINGS = {"ignore_unknown_options": True, "allow_extra_args": True}

app = typer.Typer(
    add_completion=False,
    help="Lint files written by an agent and report a continue/block decision.",
    context_settings=_CONTEXT_SETTINGS,
)


def _version_callback(value: bool) -> None:
    """Print the package version and exit when ``--version`` is passed.

    Args:
        value: Flag value supplied by Typer.

    Raises:
        typer.Exit: Raised after printing the version.
    """

    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.command(context_settings=_CONTEXT_SETTINGS)
def hook(
    debug: Annotated[
        bool,
        typer.Option("--debug", "--verbose", envvar=ENV_DEBUG, help="Include informational messages on continue."),
    ] = False,
    lenient: Annotated[
        bool,
        typer.Option("--lenient", envvar=ENV_LENIENT, help="Relax unused-variable, unused-import and undefined rules."),
    ] = False,
    collect: Annotated[
        bool,
        typer.Option("--collect", help="Record the file for a later --lint-collected run."),
    ] = False,
    lint_collected: Annotated[
        bool,
        typer.Option("--lint-collected", help="Lint every file recorded for the session."),
    ] = False,
    trace: Annotated[
        bool,
        typer.Option("--trace", envvar=ENV_TRACE, help="Write diagnostic logs to stderr."),
    ] = False,
    state_dir: Annotated[
        Path | None,
        typer.Option("--state-dir", envvar=ENV_STATE_DIR, help="Directory holding session records."),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", envvar=ENV_TIMEOUT, help="Kill lint tools running longer than this many seconds."),
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", "-V", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Read one event from stdin and print the lint decision."""

    try:
        payload = sys.stdin.read()
        settings = HookSettings.from_flags(
            collect=collect,
            lint_collected=lint_collected,
            verbose=debug,
            lenient=lenient,
            trace=trace,
            state_dir=state_dir,
            timeout=timeout,
        )
        logger = build_logger(trace=settings.trace)
        decision = HookRunner(settings, logger=logger).run(payload)
    except Exception as exc:  # noqa: BLE001 - every failure degrades to continue
        decision = Decision.proceed(prefixed(f"lint hook error: {exc}"))
    typer.echo(render_decision(decision, verbose=debug))


def main() -> None:
    """Console-script entry point.

    Option parsing errors (for example a malformed environment value) are
    reported as a continue decision instead of a usage error.
    """

    try:
        app(standalone_mode=False)
    except typer.Abort:
        typer.echo(render_decision(Decision.proceed(), verbose=False))
    except Exception as exc:  # noqa: BLE001 - parse failures degrade to continue
        typer.echo(render_decision(Decision.proceed(prefixed(f"lint hook error: {exc}")), verbose=False))


__all__ = ["app", "hook", "main"]
