"""String converters applied to enum tokens on decode.

A converter receives the unescaped JSON string content and returns the value
to wrap. It signals failure by raising ``ValueError``.
"""

from __future__ import annotations

import base64
import binascii
from typing import Protocol


class StringConverter(Protocol):
    def __call__(self, raw: str, /) -> str: ...


def identity(raw: str) -> str:
    """Return *raw* unchanged."""
    return raw


def strip_whitespace(raw: str) -> str:
    """Drop leading and trailing whitespace."""
    return raw.strip()


def base64_text(raw: str) -> str:
    """Decode standard base64 into UTF-8 text."""
    try:
        return base64.b64decode(raw, validate=True).decode("utf-8")
    except binascii.Error as exc:
        raise ValueError(f"invalid base64: {exc}") from exc


BUILTIN_CONVERTERS: dict[str, StringConverter] = {
    "identity": identity,
    "strip_whitespace": strip_whitespace,
    "base64_text": base64_text,
}
