"""Write rendered files to the output directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from sdkmodels.codegen.render import RenderedFile

logger = logging.getLogger(__name__)


@dataclass
class WriteResult:
    changed: list[Path] = field(default_factory=list)
    unchanged: list[Path] = field(default_factory=list)
    removed: list[Path] = field(default_factory=list)

    @property
    def up_to_date(self) -> bool:
        return not self.changed and not self.removed


def _orphans(
    files: list[RenderedFile], output_dir: Path, owned: Callable[[str], bool]
) -> list[Path]:
    """Generated ``*.py`` files in *output_dir* that no rendered file accounts for."""
    if not output_dir.is_dir():
        return []
    expected = {rendered.path.name for rendered in files}
    return [
        path
        for path in sorted(output_dir.glob("*.py"))
        if path.name not in expected and owned(path.read_text(encoding="utf-8"))
    ]


def write_files(
    files: list[RenderedFile],
    output_dir: Path,
    *,
    check: bool = False,
    owned: Callable[[str], bool] | None = None,
) -> WriteResult:
    """Write *files* under *output_dir*, skipping files whose content is unchanged.

    With ``check=True`` nothing is written; the result only reports which
    files are missing or stale. When *owned* is given, other ``*.py`` files
    in *output_dir* for which it returns True are leftovers of an earlier run:
    they are deleted, or only reported in check mode. Files it rejects are
    never touched.
    """
    result = WriteResult()
    for rendered in files:
        target = output_dir / rendered.path
        current = target.read_text(encoding="utf-8") if target.is_file() else None
        if current == rendered.content:
            result.unchanged.append(target)
            continue

        result.changed.append(target)
        if check:
            logger.info("Stale: %s", target)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(rendered.content, encoding="utf-8")
        logger.info("Wrote %s", target)

    if owned is not None:
        for path in _orphans(files, output_dir, owned):
            result.removed.append(path)
            if check:
                logger.info("Leftover: %s", path)
                continue
            path.unlink()
            logger.info("Removed %s", path)
    return result
