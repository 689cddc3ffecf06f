"""Configuration models for the enum code generator."""

from __future__ import annotations

import keyword
import logging
from pathlib import Path
from typing import Annotated, Any, Self

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sdkmodels.codec.converters import BUILTIN_CONVERTERS

_CONSTANT_NAME = r"^[A-Z][A-Z0-9_]*$"
_DEFAULT_HEADER = "Generated by sdkmodels. Do not edit by hand."


def _reject_keywords(dotted: str) -> str:
    """Each dotted part becomes an import path segment and must not be a keyword."""
    reserved = [part for part in dotted.split(".") if keyword.iskeyword(part)]
    if reserved:
        raise ValueError(f"{dotted!r} uses the Python keyword {reserved[0]!r}")
    return dotted


class GeneratorConfig(BaseSettings):
    """Generator output settings.

    Fields can be set via YAML (constructor kwargs) or environment variables
    with the ``SDKMODELS_`` prefix.  Constructor kwargs take precedence.
    """

    model_config = SettingsConfigDict(env_prefix="SDKMODELS_")

    package: str = Field(pattern=r"^[a-z_][a-z0-9_]*(\.[a-z_][a-z0-9_]*)*$")
    output_dir: Path
    header: str = _DEFAULT_HEADER

    _check_package = field_validator("package")(_reject_keywords)


def _log_level(v: Any) -> Any:
    if not isinstance(v, str):
        return v
    levels = logging.getLevelNamesMapping()
    name = v.strip().upper()
    if not name:
        return None
    if name not in levels:
        raise ValueError(f"unknown log level {v!r} (expected one of: {', '.join(sorted(levels))})")
    return levels[name]


class LogSettings(BaseSettings):
    """CLI logging settings, read from ``SDKMODELS_LOG`` (a level name such as ``debug``)."""

    model_config = SettingsConfigDict(env_prefix="SDKMODELS_")

    log: Annotated[int | None, BeforeValidator(_log_level)] = None


def _none_to_list(v: Any) -> Any:
    return v if v is not None else []


class EnumSpec(BaseModel):
    """One enum family: a class name and its ``CONSTANT: wire-value`` table."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(pattern=r"^[A-Z][A-Za-z0-9]*$")
    description: str = ""
    converter: str = "identity"
    values: dict[Annotated[str, Field(pattern=_CONSTANT_NAME)], str] = Field(min_length=1)

    _check_name = field_validator("name")(_reject_keywords)

    @field_validator("converter")
    @classmethod
    def _check_converter(cls, v: str) -> str:
        if v not in BUILTIN_CONVERTERS:
            known = ", ".join(sorted(BUILTIN_CONVERTERS))
            raise ValueError(f"unknown converter {v!r} (expected one of: {known})")
        return v

    @model_validator(mode="after")
    def _check_unique_values(self) -> Self:
        seen: dict[str, str] = {}
        for const, value in self.values.items():
            if value in seen:
                raise ValueError(
                    f"{self.name}: {const} and {seen[value]} share the wire value {value!r}"
                )
            seen[value] = const
        return self


class ModuleSpec(BaseModel):
    """One generated Python module holding several enum families."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(pattern=r"^[a-z][a-z0-9_]*$")
    description: str = ""
    enums: list[EnumSpec] = Field(min_length=1)

    _check_name = field_validator("name")(_reject_keywords)


class Config(BaseModel):
    """Generator configuration: validates YAML structure directly."""

    generator: GeneratorConfig
    modules: Annotated[list[ModuleSpec], BeforeValidator(_none_to_list)] = []
    config_dir: Path = Path()

    @model_validator(mode="after")
    def _check_unique_names(self) -> Self:
        errors: list[str] = []
        modules: set[str] = set()
        families: dict[str, str] = {}  # family → first module
        for module in self.modules:
            if module.name in modules:
                errors.append(f"Duplicate module name '{module.name}'")
            modules.add(module.name)
            for enum in module.enums:
                if enum.name in families:
                    errors.append(
                        f"Duplicate enum name '{enum.name}': "
                        f"found in both {families[enum.name]} and {module.name}"
                    )
                else:
                    families[enum.name] = module.name
        if errors:
            raise ValueError("; ".join(errors))
        return self

    @property
    def output_path(self) -> Path:
        """Output directory, resolved against the config file's directory."""
        out = self.generator.output_dir
        return out if out.is_absolute() else self.config_dir / out
