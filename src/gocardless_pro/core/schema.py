"""Explicit field tables used to decode resources from JSON."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .errors import GoCardlessProtocolError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

Decoder = Callable[[object], object]


def as_text(value: object) -> str | None:
    if value is None:
        return None
    return str(value)


def as_int(value: object) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise GoCardlessProtocolError(f"expected integer, got {type(value).__name__}")
    return value


def as_bool(value: object) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise GoCardlessProtocolError(f"expected boolean, got {type(value).__name__}")
    return value


def as_metadata(value: object) -> dict[str, str] | None:
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise GoCardlessProtocolError("metadata must be an object")
    return {str(key): str(item) for key, item in value.items()}


def as_enum(enum_type: type[E]) -> Callable[[object], E | str | None]:
    """Decode a wire token into ``enum_type``; unknown tokens stay raw strings."""

    def _decode(value: object) -> E | str | None:
        if value is None:
            return None
        try:
            return enum_type(value)
        except ValueError:
            return str(value)

    return _decode


def as_nested(schema: "ResourceSchema[T]") -> Callable[[object], T | None]:
    def _decode(value: object) -> T | None:
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise GoCardlessProtocolError(
                f"{schema.model.__name__} payload must be an object"
            )
        return schema.decode(value)

    return _decode


@dataclass(slots=True, frozen=True)
class Field:
    name: str
    decode: Decoder = as_text
    wire_key: str | None = None

    @property
    def key(self) -> str:
        return self.wire_key or self.name


@dataclass(slots=True, frozen=True)
class ResourceSchema(Generic[T]):
    """Maps a resource model's fields to their JSON keys.

    The table must cover every dataclass field of ``model`` exactly; this is
    checked when the schema is declared.
    """

    model: type[T]
    fields: tuple[Field, ...]

    def __post_init__(self) -> None:
        if not dataclasses.is_dataclass(self.model):
            raise TypeError(f"{self.model!r} is not a dataclass")
        declared = {f.name for f in self.fields}
        expected = {f.name for f in dataclasses.fields(self.model)}
        if len(declared) != len(self.fields):
            raise TypeError(f"{self.model.__name__} schema declares a field twice")
        if declared != expected:
            missing = sorted(expected - declared)
            unknown = sorted(declared - expected)
            raise TypeError(
                f"{self.model.__name__} schema mismatch: missing={missing} unknown={unknown}"
            )

    def decode(self, payload: Mapping[str, object]) -> T:
        values: dict[str, Any] = {}
        for item in self.fields:
            if item.key not in payload:
                continue
            values[item.name] = item.decode(payload[item.key])
        return self.model(**values)


__all__ = [
    "Decoder",
    "as_text",
    "as_int",
    "as_bool",
    "as_metadata",
    "as_enum",
    "as_nested",
    "Field",
    "ResourceSchema",
]
