"""JSON marshal/unmarshal for models and enum values."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import BaseModel, ValidationError

from sdkmodels.codec.enum import OpenEnum
from sdkmodels.codec.errors import DecodeError, ModelDecodeError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails

M = TypeVar("M", bound=BaseModel)


def marshal(obj: BaseModel | OpenEnum) -> bytes:
    """Serialize a model or enum value to wire JSON.

    Models are dumped by alias and ``None`` fields are left out.
    """
    if isinstance(obj, OpenEnum):
        return obj.encode()
    return obj.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")


def _format_token(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


def _format_error(error: ErrorDetails) -> str:
    loc = ".".join(str(p) for p in error["loc"]) or "<root>"
    cause = error.get("ctx", {}).get("error")
    reason = cause.reason if isinstance(cause, DecodeError) else error["msg"]
    return f"{loc}: {reason} (raw token: {_format_token(error['input'])})"


def unmarshal(model_cls: type[M], data: bytes | str) -> M:
    """Decode wire JSON into *model_cls*.

    Raises:
        ModelDecodeError: Listing every failing field with its raw token.
    """
    try:
        return model_cls.model_validate_json(data)
    except ValidationError as exc:
        errors = [_format_error(e) for e in exc.errors(include_url=False)]
        raise ModelDecodeError(model_cls.__name__, errors) from exc
