"""Open string enums.

An enum family is declared as an ``OpenEnum`` subclass whose upper-case
string attributes are its named constants::

    class CredentialStatus(OpenEnum):
        ACTIVE = "active"
        INACTIVE = "inactive"

At class creation every constant is replaced by an instance of the family and
collected into a read-only ``EnumRegistry``. Decoding never consults that
registry: any JSON string is accepted, so values added on the server side
survive a round trip through an older client.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Self, TypeVar

from pydantic_core import core_schema

from sdkmodels.codec.converters import StringConverter, identity
from sdkmodels.codec.errors import DecodeError

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
    from pydantic.json_schema import JsonSchemaValue

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="OpenEnum")

_CONSTANT_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")


def _is_unicode_text(value: str) -> bool:
    # Lone surrogates survive json.loads but cannot be encoded back to UTF-8.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class EnumRegistry(Mapping[str, E], Generic[E]):
    """Immutable ``NAME -> member`` table for one enum family."""

    __slots__ = ("_family", "_members", "_by_value")

    def __init__(self, family: str, members: Mapping[str, E]) -> None:
        self._family = family
        self._members: Mapping[str, E] = MappingProxyType(dict(members))
        self._by_value: Mapping[str, str] = MappingProxyType(
            {m.value: name for name, m in self._members.items()}
        )

    @property
    def family(self) -> str:
        return self._family

    def __getitem__(self, name: str) -> E:
        try:
            return self._members[name]
        except KeyError:
            raise KeyError(f"{self._family} has no constant {name!r}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={m.value!r}" for name, m in self._members.items())
        return f"EnumRegistry({self._family}: {body})"

    def name_of(self, value: str) -> str | None:
        """Constant name for a wire value, or ``None`` when it is not registered."""
        return self._by_value.get(value)


def _serialize(member: OpenEnum) -> str:
    return member.value


class OpenEnum:
    """Base class for open string enum families.

    Instances wrap a single string and are immutable. Two instances are equal
    when they belong to the same family and wrap the same string.

    A family may inject a converter that is applied to every decoded string::

        class Region(OpenEnum, converter=strip_whitespace):
            EU_WEST = "eu-west-0"
    """

    __slots__ = ("_value",)

    _registry: ClassVar[EnumRegistry[Any]] = EnumRegistry("OpenEnum", {})
    _converter: ClassVar[Any] = staticmethod(identity)

    def __init_subclass__(cls, *, converter: StringConverter | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for base in cls.__mro__[1:]:
            if issubclass(base, OpenEnum) and base is not OpenEnum and base._registry:
                raise TypeError(f"Cannot extend enum family {base.__name__} with {cls.__name__}")

        if converter is not None:
            cls._converter = staticmethod(converter)

        members: dict[str, Self] = {}
        for name, value in list(vars(cls).items()):
            if _CONSTANT_NAME.match(name) and isinstance(value, str):
                member = cls(value)
                setattr(cls, name, member)
                members[name] = member
        cls._registry = EnumRegistry(cls.__name__, members)

    def __init__(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"{type(self).__name__} wraps a str, got {type(value).__name__}")
        if not _is_unicode_text(value):
            raise ValueError(f"{type(self).__name__} value {value!r} is not valid unicode text")
        object.__setattr__(self, "_value", value)

    # ── Value semantics ─────────────────────────────────────────────

    @property
    def value(self) -> str:
        """The wire representation."""
        return self._value

    @property
    def is_known(self) -> bool:
        """True when the value is one of the family's named constants."""
        return self._registry.name_of(self._value) is not None

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OpenEnum):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._value,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __str__(self) -> str:
        return self._value

    # ── Registry access ─────────────────────────────────────────────

    @classmethod
    def members(cls) -> EnumRegistry[Self]:
        """The family's named constants."""
        return cls._registry

    @classmethod
    def from_name(cls, name: str) -> Self:
        """Return the named constant, e.g. ``from_name("ACTIVE")``."""
        return cls._registry[name]

    # ── Codec ───────────────────────────────────────────────────────

    def encode(self) -> bytes:
        """Encode as a JSON string token (UTF-8)."""
        return json.dumps(self._value, ensure_ascii=False).encode("utf-8")

    @classmethod
    def decode(cls, raw: bytes | str, *, converter: StringConverter | None = None) -> Self:
        """Decode one JSON string token.

        The token content is passed through *converter* (the family's own
        converter by default) and wrapped as is, known or not.

        Raises:
            DecodeError: If *raw* is not a JSON string token or the converter
                fails.
        """
        try:
            token = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            text = raw.decode("utf-8", "replace") if isinstance(raw, bytes) else raw
            raise DecodeError(cls.__name__, text, "malformed JSON string") from exc
        if not isinstance(token, str):
            raise DecodeError(cls.__name__, token, "expected a JSON string")
        if not _is_unicode_text(token):
            raise DecodeError(cls.__name__, token, "invalid unicode escape")
        return cls._from_string(token, converter)

    @classmethod
    def _from_string(cls, raw: str, converter: StringConverter | None = None) -> Self:
        convert = converter if converter is not None else cls._converter
        try:
            converted = convert(raw)
        except ValueError as exc:
            raise DecodeError(cls.__name__, raw, str(exc)) from exc
        if not isinstance(converted, str):
            raise DecodeError(cls.__name__, raw, "converter did not return a string")
        if not _is_unicode_text(converted):
            raise DecodeError(cls.__name__, raw, "not valid unicode text")

        member = cls(converted)
        if not member.is_known:
            logger.debug("Decoded unregistered %s value %r", cls.__name__, converted)
        return member

    @classmethod
    def _validate(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls._from_string(value)
        raise DecodeError(cls.__name__, value, "expected a JSON string")

    # ── Pydantic hooks ──────────────────────────────────────────────

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize, return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        known = [m.value for m in cls._registry.values()]
        return {"type": "string", "title": cls.__name__, "examples": known}
