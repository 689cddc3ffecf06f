"""Cloud SDK request/response models with open string enums."""

from sdkmodels.codec import DecodeError, EnumRegistry, OpenEnum, marshal, unmarshal

__version__ = "0.1.0"

__all__ = [
    "DecodeError",
    "EnumRegistry",
    "OpenEnum",
    "__version__",
    "marshal",
    "unmarshal",
]
