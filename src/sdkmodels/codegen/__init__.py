"""Enum family code generation."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING

from sdkmodels.codegen.render import (
    RenderedFile,
    is_generated,
    render_enum,
    render_module,
    render_modules,
)
from sdkmodels.codegen.writer import WriteResult, write_files

if TYPE_CHECKING:
    from sdkmodels.config.schema import Config

__all__ = [
    "RenderedFile",
    "WriteResult",
    "generate",
    "is_generated",
    "render_enum",
    "render_module",
    "render_modules",
    "write_files",
]


def generate(config: Config, *, check: bool = False) -> WriteResult:
    """Render all configured modules and write them to the output directory.

    Modules left behind by an earlier run (same header, no longer configured)
    are removed, or reported when *check* is set.
    """
    owned = partial(is_generated, header=config.generator.header)
    return write_files(render_modules(config), config.output_path, check=check, owned=owned)