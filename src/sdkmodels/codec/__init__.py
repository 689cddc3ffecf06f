"""Open string enum codec and JSON helpers."""

from sdkmodels.codec.converters import StringConverter, base64_text, identity, strip_whitespace
from sdkmodels.codec.enum import EnumRegistry, OpenEnum
from sdkmodels.codec.errors import DecodeError, ModelDecodeError, SdkModelsError, UnknownModelError
from sdkmodels.codec.marshal import marshal, unmarshal

__all__ = [
    "DecodeError",
    "EnumRegistry",
    "ModelDecodeError",
    "OpenEnum",
    "SdkModelsError",
    "StringConverter",
    "UnknownModelError",
    "base64_text",
    "identity",
    "marshal",
    "strip_whitespace",
    "unmarshal",
]
