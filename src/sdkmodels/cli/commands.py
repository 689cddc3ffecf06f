"""CLI command implementations."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Annotated

import typer

from sdkmodels.cli import app
from sdkmodels.cli.errors import handle_error

ConfigPath = Annotated[
    Path,
    typer.Option("--config", "-c", help="Path to the generator configuration file."),
]

NoColor = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output."),
]


def _use_color(no_color: bool) -> bool:
    """Determine whether to use color output."""
    return not (no_color or os.environ.get("NO_COLOR"))


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


@app.command()
def models(
    service: Annotated[
        str | None,
        typer.Option("--service", "-s", help="Only list models of this service."),
    ] = None,
) -> None:
    """List the models available for decoding."""
    from sdkmodels.models import default_catalog

    catalog = default_catalog()
    for name in catalog.names(service):
        typer.echo(f"{catalog.get(name).service:<5} {name}")


@app.command()
def enums(
    model: Annotated[
        str | None,
        typer.Option("--model", "-m", help="Only list enums used by this model."),
    ] = None,
    no_color: NoColor = False,
) -> None:
    """List enum families and their named constants."""
    from rich.console import Console

    from sdkmodels.cli.formatting import enum_table
    from sdkmodels.models import default_catalog

    color = _use_color(no_color)
    try:
        families = default_catalog().enum_families(model)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    if not families:
        typer.echo("No enum families.")
        return
    Console(no_color=not color).print(enum_table(families))


@app.command()
def decode(
    model: Annotated[str, typer.Argument(help="Model name, e.g. UpdateCredentialOption.")],
    file: Annotated[
        Path | None,
        typer.Argument(help="JSON payload file (default: stdin)."),
    ] = None,
    no_color: NoColor = False,
) -> None:
    """Decode a JSON payload into a model and print it."""
    from sdkmodels.codec import unmarshal
    from sdkmodels.models import default_catalog

    color = _use_color(no_color)
    try:
        model_cls = default_catalog().get(model)
        obj = unmarshal(model_cls, _read_input(file))
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    typer.echo(str(obj))


@app.command(name="decode-enum")
def decode_enum(
    family: Annotated[str, typer.Argument(help="Enum family name.")],
    token: Annotated[str, typer.Argument(help='JSON string token, e.g. \'"active"\'.')],
    no_color: NoColor = False,
) -> None:
    """Decode a single enum token and report whether it is a known constant."""
    from sdkmodels.cli.formatting import styler
    from sdkmodels.models import default_catalog

    color = _use_color(no_color)
    style = styler(color)
    try:
        families = {f.__name__: f for f in default_catalog().enum_families()}
        if family not in families:
            raise ValueError(f"Unknown enum family: {family}")
        member = families[family].decode(token)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    name = member.members().name_of(member.value)
    if name is not None:
        typer.echo(f"{family}.{name} = {member.value!r}")
    else:
        typer.echo(style(f"{family}({member.value!r}) (not a named constant)", fg="yellow"))


@app.command()
def generate(
    config: ConfigPath = Path("sdkmodels.yaml"),
    check: Annotated[
        bool,
        typer.Option("--check", help="Only report stale or leftover files; exit 2 if any."),
    ] = False,
    no_color: NoColor = False,
) -> None:
    """Generate enum family modules from the configuration file."""
    from sdkmodels.cli.formatting import format_generate_result
    from sdkmodels.codegen import generate as generate_fn
    from sdkmodels.config import load_config

    color = _use_color(no_color)
    try:
        cfg = load_config(config)
        result = generate_fn(cfg, check=check)
    except Exception as exc:
        raise typer.Exit(handle_error(exc, color=color)) from exc

    typer.echo(format_generate_result(result, cfg.output_path, check=check, color=color))
    if check and not result.up_to_date:
        raise typer.Exit(2)
