"""Codec and model error types."""

from __future__ import annotations

from typing import Any


class SdkModelsError(Exception):
    """Base exception for sdkmodels errors."""


class DecodeError(SdkModelsError, ValueError):
    """Raised when a single enum token cannot be decoded.

    Subclasses ``ValueError`` so pydantic reports it against the field that
    carried the token instead of aborting validation with a raw exception.
    Field paths are reported by ``ModelDecodeError``.
    """

    def __init__(self, family: str, token: Any, reason: str) -> None:
        self.family = family
        self.token = token
        self.reason = reason
        super().__init__(f"cannot decode {family} from {token!r}: {reason}")


class ModelDecodeError(SdkModelsError):
    """Raised when a model payload fails to decode.

    ``errors`` holds one human-readable line per failing field, each naming
    the field path and the raw offending token.
    """

    def __init__(self, model: str, errors: list[str]) -> None:
        self.model = model
        self.errors = errors
        msg = f"Failed to decode {model}:\n" + "\n".join(f"  - {e}" for e in errors)
        super().__init__(msg)


class UnknownModelError(SdkModelsError):
    """Raised when a model name has no catalog registration."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown model: {name}")
        self.name = name
