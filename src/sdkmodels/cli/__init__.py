"""``sdkmodels`` command line.

Subcommands live in :mod:`sdkmodels.cli.commands`. This module owns the app,
``--version`` and the log setup every subcommand shares.
"""

from __future__ import annotations

import logging
import sys
from typing import Annotated

import typer
from pydantic import ValidationError

from sdkmodels import __version__
from sdkmodels.config.schema import LogSettings

app = typer.Typer(
    name="sdkmodels",
    help="Inspect SDK models, decode payloads and generate open enum modules.",
    no_args_is_help=True,
    add_completion=False,
)

# Indexed by -v count minus one.
_VERBOSITY_LEVELS = (logging.INFO, logging.DEBUG)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(f"sdkmodels {__version__}")
        raise typer.Exit


def _resolve_log_level(verbose: int) -> int | None:
    """``SDKMODELS_LOG`` wins over ``-v``. ``None`` leaves logging untouched."""
    try:
        configured = LogSettings().log
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"]
        typer.secho(f"Ignoring SDKMODELS_LOG: {reason}", err=True, fg=typer.colors.YELLOW)
        configured = None
    if configured is not None:
        return configured
    if verbose:
        return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS)) - 1]
    return None


def _setup_logging(level: int) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger = logging.getLogger("sdkmodels")
    logger.handlers[:] = [handler]
    logger.setLevel(level)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_print_version,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Log config loading, generated files (-v) and unregistered enum values (-vv).",
        ),
    ] = 0,
) -> None:
    """Cloud SDK models with forward-compatible open string enums."""
    del version
    level = _resolve_log_level(verbose)
    if level is not None:
        _setup_logging(level)


# Subcommands register themselves on ``app`` at import.
from sdkmodels.cli import commands as _commands  # noqa: E402, F401
