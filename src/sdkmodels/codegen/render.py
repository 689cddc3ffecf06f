"""Render enum family modules from a generator config.

Output is deterministic: the same config always renders byte-identical
files, which is what ``generate --check`` relies on.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from string import Template
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sdkmodels.config.schema import Config, EnumSpec, ModuleSpec

_MODULE = Template('''\
"""$title

$header
"""

$imports


$classes
''')

_CLASS = Template('''\
class $name($bases):
$body''')

_INIT = Template('''\
"""Generated enum families.

$header
"""

$imports

__all__ = [
$exports
]
''')


@dataclass(frozen=True)
class RenderedFile:
    """A generated file, relative to the output directory."""

    path: Path
    content: str


def _escape_doc(text: str) -> str:
    # Every quote is escaped, so no run of them can close the docstring.
    return text.strip().replace("\\", "\\\\").replace('"', '\\"')


def _docstring(text: str, indent: str = "    ") -> str:
    """Render *text* as a triple-quoted docstring at *indent*."""
    text = _escape_doc(text)
    lines = text.splitlines()
    if len(lines) == 1:
        return f'{indent}"""{lines[0]}"""\n'
    body = "\n".join(f"{indent}{line}" if line else "" for line in lines[1:])
    return f'{indent}"""{lines[0]}\n{body}\n{indent}"""\n'


def is_generated(content: str, header: str) -> bool:
    """True when *content* carries *header* the way rendered modules do."""
    marker = _escape_doc(header)
    return bool(marker) and marker in content


def _literal(value: str) -> str:
    # JSON string escapes are a subset of Python's.
    return json.dumps(value, ensure_ascii=False)


def render_enum(spec: EnumSpec) -> str:
    """Render a single ``OpenEnum`` subclass."""
    bases = "OpenEnum"
    if spec.converter != "identity":
        bases += f", converter={spec.converter}"

    body = ""
    if spec.description:
        body += _docstring(spec.description) + "\n"
    body += "".join(f"    {const} = {_literal(value)}\n" for const, value in spec.values.items())
    return _CLASS.substitute(name=spec.name, bases=bases, body=body)


def render_module(module: ModuleSpec, header: str) -> str:
    """Render one module holding all of its enum families."""
    converters = sorted({e.converter for e in module.enums} - {"identity"})
    imports = ["from sdkmodels.codec import OpenEnum"]
    if converters:
        imports.append(f"from sdkmodels.codec.converters import {', '.join(converters)}")

    title = module.description.strip() or f"Enum families for {module.name}."
    classes = "\n\n".join(render_enum(e) for e in module.enums)
    return _MODULE.substitute(
        title=_escape_doc(title),
        header=_escape_doc(header),
        imports="\n".join(imports),
        classes=classes.rstrip("\n"),
    )


def render_init(config: Config) -> str:
    """Render the package ``__init__`` re-exporting every family."""
    package = config.generator.package
    blocks: list[str] = []
    names: list[str] = []
    for module in sorted(config.modules, key=lambda m: m.name):
        members = sorted(e.name for e in module.enums)
        names.extend(members)
        lines = "".join(f"    {n},\n" for n in members)
        blocks.append(f"from {package}.{module.name} import (\n{lines})")
    return _INIT.substitute(
        header=_escape_doc(config.generator.header),
        imports="\n".join(blocks),
        exports="\n".join(f'    "{n}",' for n in sorted(names)),
    )


def render_modules(config: Config) -> list[RenderedFile]:
    """Render every configured module plus the package ``__init__``."""
    files = [
        RenderedFile(Path(f"{m.name}.py"), render_module(m, config.generator.header))
        for m in config.modules
    ]
    files.append(RenderedFile(Path("__init__.py"), render_init(config)))
    return files
