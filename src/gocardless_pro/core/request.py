"""Immutable request descriptions."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Generic, TypeVar

from .errors import GoCardlessConfigurationError
from .schema import ResourceSchema

T = TypeVar("T")


class ResultShape(Enum):
    SINGLE = "single"
    LIST = "list"


class RequestKind(Enum):
    """Request variant; fixes the HTTP verb and the result shape."""

    GET = ("GET", ResultShape.SINGLE)
    POST = ("POST", ResultShape.SINGLE)
    PUT = ("PUT", ResultShape.SINGLE)
    LIST = ("GET", ResultShape.LIST)

    def __init__(self, method: str, shape: ResultShape) -> None:
        self.method = method
        self.shape = shape


@dataclass(slots=True, frozen=True)
class ApiRequest(Generic[T]):
    kind: RequestKind
    path_template: str
    envelope: str
    schema: ResourceSchema[T]
    path_params: Mapping[str, object] = field(default_factory=dict)
    query_params: Mapping[str, object] = field(default_factory=dict)
    body: Mapping[str, object] | None = None

    def __post_init__(self) -> None:
        if not self.envelope:
            raise GoCardlessConfigurationError("envelope must not be empty")
        if self.body is not None and self.kind.method == "GET":
            raise GoCardlessConfigurationError(
                f"{self.kind.name} request to {self.path_template!r} cannot carry a body"
            )
        object.__setattr__(self, "path_params", MappingProxyType(dict(self.path_params)))
        object.__setattr__(self, "query_params", MappingProxyType(dict(self.query_params)))
        if self.body is not None:
            object.__setattr__(self, "body", MappingProxyType(dict(self.body)))

    @property
    def method(self) -> str:
        return self.kind.method

    @property
    def shape(self) -> ResultShape:
        return self.kind.shape

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def with_query(self, **params: object) -> "ApiRequest[T]":
        return replace(self, query_params={**self.query_params, **params})


__all__ = [
    "ResultShape",
    "RequestKind",
    "ApiRequest",
]
