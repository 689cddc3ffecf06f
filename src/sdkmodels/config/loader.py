"""YAML configuration file loader."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values
from pydantic import ValidationError
from ruamel.yaml import YAML

from sdkmodels.codec.errors import SdkModelsError
from sdkmodels.config.schema import Config

logger = logging.getLogger(__name__)


class ConfigError(SdkModelsError):
    """Raised for configuration loading / validation errors."""


# Field name → environment variable.
_GENERATOR_ENV_MAP: dict[str, str] = {
    "package": "SDKMODELS_PACKAGE",
    "output_dir": "SDKMODELS_OUTPUT_DIR",
    "header": "SDKMODELS_HEADER",
}


def _resolve_generator(raw_generator: dict[str, Any], config_dir: Path) -> dict[str, Any]:
    """Resolve generator fields from YAML, env vars, and ``.env`` file.

    Priority (highest wins): YAML value > env var > ``.env`` file.
    """
    env_file = config_dir / ".env"
    dotenv_vals = dotenv_values(env_file, encoding="utf-8-sig") if env_file.is_file() else {}

    resolved: dict[str, Any] = {}
    for field, env_key in _GENERATOR_ENV_MAP.items():
        val = raw_generator.get(field)
        if val is None:
            val = os.environ.get(env_key)
        if val is None:
            val = dotenv_vals.get(env_key)
        if val is not None:
            resolved[field] = val

    return resolved


def load_config(path: Path | str) -> Config:
    """Load a YAML generator configuration and return a ``Config`` object.

    Raises:
        ConfigError: On YAML parse errors, missing sections, or validation failures.
    """
    path = Path(path)

    try:
        raw = YAML(typ="safe").load(path)
    except Exception as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    try:
        raw["generator"] = _resolve_generator(raw.get("generator") or {}, path.parent)
        config = Config.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc

    config.config_dir = path.parent

    families = sum(len(m.enums) for m in config.modules)
    logger.info("Loaded config from %s (%d modules, %d enums)", path, len(config.modules), families)
    return config
