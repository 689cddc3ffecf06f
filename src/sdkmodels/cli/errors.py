"""Map exceptions to clean stderr messages and exit codes."""

from __future__ import annotations

import typer


def _err(msg: str, *, fg: str | None) -> None:
    """Print a styled message to stderr."""
    typer.echo(typer.style(msg, fg=fg), err=True)


def handle_error(exc: Exception, *, color: bool = True) -> int:
    """Print a clean error message to stderr and return an exit code.

    All errors map to exit code 1.  No tracebacks are printed.
    """
    from sdkmodels.codec.errors import DecodeError, ModelDecodeError, UnknownModelError
    from sdkmodels.config.loader import ConfigError

    fg = typer.colors.RED if color else None

    if isinstance(exc, ConfigError):
        _err(f"Configuration error: {exc}", fg=fg)
    elif isinstance(exc, ModelDecodeError):
        _err(f"Decode failed for {exc.model}:", fg=fg)
        for e in exc.errors:
            _err(f"  - {e}", fg=fg)
    elif isinstance(exc, DecodeError):
        _err(f"Decode failed: {exc}", fg=fg)
    elif isinstance(exc, UnknownModelError):
        _err(f"{exc}. Run 'sdkmodels models' to list available models.", fg=fg)
    else:
        _err(f"Error: {exc}", fg=fg)

    return 1
