"""Listing and generator output rendering."""

from __future__ import annotations

from typing import TYPE_CHECKING

import typer
from rich.table import Table

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from sdkmodels.codec import OpenEnum
    from sdkmodels.codegen import WriteResult


def styler(color: bool) -> Callable[..., str]:
    """Return ``typer.style`` when *color* is True, otherwise a passthrough."""
    if color:
        return typer.style
    return lambda text, **_kw: text


def enum_table(families: list[type[OpenEnum]]) -> Table:
    """One row per named constant, grouped by family."""
    table = Table("Family", "Constant", "Value")
    for family in families:
        for name, member in family.members().items():
            table.add_row(family.__name__, name, repr(member.value))
    return table


def _rel(path: Path, base: Path) -> str:
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)


def format_generate_result(
    result: WriteResult, output_dir: Path, *, check: bool, color: bool = True
) -> str:
    """Render ``generate`` output: one line per touched file plus a summary."""
    style = styler(color)
    if result.up_to_date:
        return style(
            f"Generated code is up-to-date ({len(result.unchanged)} files).", fg="green"
        )

    symbol, fg, verb = ("~", "yellow", "out of date") if check else ("+", "green", "written")
    lines = [style(f"  {symbol} {_rel(p, output_dir)}", fg=fg) for p in result.changed]
    lines.extend(style(f"  - {_rel(p, output_dir)}", fg="red") for p in result.removed)

    counts = [f"{len(result.changed)} {verb}"]
    if result.removed:
        counts.append(f"{len(result.removed)} {'left over' if check else 'removed'}")
    counts.append(f"{len(result.unchanged)} unchanged")
    lines.append(", ".join(counts) + ".")
    return "\n".join(lines)
