"""Generator configuration loading."""

from sdkmodels.config.loader import ConfigError, load_config
from sdkmodels.config.schema import Config, EnumSpec, GeneratorConfig, LogSettings, ModuleSpec

__all__ = [
    "Config",
    "ConfigError",
    "EnumSpec",
    "GeneratorConfig",
    "LogSettings",
    "ModuleSpec",
    "load_config",
]
